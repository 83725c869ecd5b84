from datetime import datetime

from agri_edu.schemas.common import CamelModel


class CatalogueItemCreate(CamelModel):
    name: str | None = None
    icon: str | None = None
    category: str | None = None
    video_url: str | None = None
    quiz_id: int | None = None


class CatalogueItemUpdate(CatalogueItemCreate):
    pass


class CatalogueItemResponse(CamelModel):
    id: int
    name: str
    icon: str | None = None
    category: str
    video_url: str | None = None
    quiz_id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
