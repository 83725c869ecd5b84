from sqlalchemy import select, func, delete
from sqlalchemy.orm import selectinload
from sqlalchemy.ext.asyncio import AsyncSession

from agri_edu.models.like import Like


async def find_like(session: AsyncSession, user_id: int, content_type: str, content_id: int) -> Like | None:
    result = await session.execute(
        select(Like).where(
            Like.user_id == user_id,
            Like.content_type == content_type,
            Like.content_id == content_id,
        )
    )
    return result.scalars().first()


async def count_likes(session: AsyncSession, content_type: str, content_id: int) -> int:
    result = await session.execute(
        select(func.count(Like.id)).where(Like.content_type == content_type, Like.content_id == content_id)
    )
    return result.scalar_one()


async def get_likes_with_users(session: AsyncSession, content_type: str, content_id: int) -> list[Like]:
    result = await session.execute(
        select(Like)
        .where(Like.content_type == content_type, Like.content_id == content_id)
        .options(selectinload(Like.user))
        .order_by(Like.id)
    )
    return list(result.scalars().all())


async def create_like(session: AsyncSession, user_id: int, content_type: str, content_id: int) -> Like:
    like = Like(user_id=user_id, content_type=content_type, content_id=content_id)
    session.add(like)
    await session.flush()
    await session.refresh(like)
    return like


async def delete_likes_for_content(session: AsyncSession, content_type: str, content_id: int) -> int:
    result = await session.execute(
        delete(Like).where(Like.content_type == content_type, Like.content_id == content_id)
    )
    return result.rowcount
