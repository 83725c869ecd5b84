"""Queries shared by the animal and crop catalogues; ``model`` is Animal or Crop."""
from typing import TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from agri_edu.models.catalogue import Animal, Crop

Item = TypeVar("Item", Animal, Crop)


async def list_items(session: AsyncSession, model: type[Item]) -> list[Item]:
    result = await session.execute(select(model).order_by(model.id))
    return list(result.scalars().all())


async def get_items_by_category(session: AsyncSession, model: type[Item], category: str) -> list[Item]:
    result = await session.execute(select(model).where(model.category == category).order_by(model.id))
    return list(result.scalars().all())


async def search_items(session: AsyncSession, model: type[Item], query: str) -> list[Item]:
    result = await session.execute(select(model).where(model.name.ilike(f"%{query}%")).order_by(model.id))
    return list(result.scalars().all())


async def create_item(session: AsyncSession, model: type[Item], **fields) -> Item:
    item = model(**fields)
    session.add(item)
    await session.flush()
    await session.refresh(item)
    return item
