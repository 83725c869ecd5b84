from datetime import datetime

from agri_edu.schemas.common import CamelModel


class VideoCreate(CamelModel):
    title: str | None = None
    category: str | None = None
    youtube_id: str | None = None
    type: str | None = None


class VideoUpdate(VideoCreate):
    pass


class VideoResponse(CamelModel):
    id: int
    title: str
    category: str
    youtube_id: str | None = None
    type: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AdditionalVideoCreate(CamelModel):
    title: str | None = None
    youtube_id: str | None = None
    video_id: int | None = None


class AdditionalVideoUpdate(AdditionalVideoCreate):
    pass


class AdditionalVideoResponse(CamelModel):
    id: int
    title: str
    youtube_id: str
    video_id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


class QnASummary(CamelModel):
    id: int
    text: str
    author_name: str
    author_image: str
    timestamp: datetime
    video_id: int
    user_id: int | None = None


class VideoDetailResponse(VideoResponse):
    additional_videos: list[AdditionalVideoResponse] = []
    questions_and_answers: list[QnASummary] = []
