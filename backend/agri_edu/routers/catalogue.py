"""Animal and crop catalogues share one router shape; each is bound to its quiz type."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from agri_edu.db.session import get_db
from agri_edu.db.repositories import catalogue_repo
from agri_edu.errors import BadRequest
from agri_edu.models import Animal, Crop, EducationType
from agri_edu.schemas.common import MessageResponse
from agri_edu.schemas.catalogue import CatalogueItemCreate, CatalogueItemUpdate, CatalogueItemResponse
from agri_edu.services.lookup import require_fields, get_or_404, ensure_quiz_of_type, merge_patch


def build_catalogue_router(model: type, kind: EducationType, label: str) -> APIRouter:
    router = APIRouter()

    @router.get("", response_model=list[CatalogueItemResponse])
    async def list_items(db: AsyncSession = Depends(get_db)):
        return await catalogue_repo.list_items(db, model)

    @router.get("/search", response_model=list[CatalogueItemResponse])
    async def search_items(query: str | None = None, db: AsyncSession = Depends(get_db)):
        if not query:
            raise BadRequest("Search query is required")
        return await catalogue_repo.search_items(db, model, query)

    @router.get("/category/{category}", response_model=list[CatalogueItemResponse])
    async def get_items_by_category(category: str, db: AsyncSession = Depends(get_db)):
        return await catalogue_repo.get_items_by_category(db, model, category)

    @router.get("/{item_id}", response_model=CatalogueItemResponse)
    async def get_item(item_id: int, db: AsyncSession = Depends(get_db)):
        return await get_or_404(db, model, item_id, label)

    @router.post("", response_model=CatalogueItemResponse, status_code=status.HTTP_201_CREATED)
    async def create_item(body: CatalogueItemCreate, db: AsyncSession = Depends(get_db)):
        require_fields(body, ["name", "category"])
        if body.quiz_id is not None:
            await ensure_quiz_of_type(db, body.quiz_id, kind.value)
        item = await catalogue_repo.create_item(db, model, **body.model_dump())
        await db.commit()
        return item

    @router.put("/{item_id}", response_model=CatalogueItemResponse)
    async def update_item(item_id: int, body: CatalogueItemUpdate, db: AsyncSession = Depends(get_db)):
        item = await get_or_404(db, model, item_id, label)
        if body.quiz_id is not None:
            await ensure_quiz_of_type(db, body.quiz_id, kind.value)
        merge_patch(item, body.model_dump(exclude_unset=True))
        await db.commit()
        await db.refresh(item)
        return item

    @router.delete("/{item_id}", response_model=MessageResponse)
    async def delete_item(item_id: int, db: AsyncSession = Depends(get_db)):
        item = await get_or_404(db, model, item_id, label)
        await db.delete(item)
        await db.commit()
        return {"message": f"{label} deleted successfully"}

    return router


animals_router = build_catalogue_router(Animal, EducationType.animal, "Animal")
crops_router = build_catalogue_router(Crop, EducationType.crop, "Crop")
