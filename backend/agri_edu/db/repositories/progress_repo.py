from datetime import datetime
from sqlalchemy import select, func, update, case
from sqlalchemy.orm import selectinload
from sqlalchemy.ext.asyncio import AsyncSession

from agri_edu.models.user_progress import UserProgress


async def list_progress(session: AsyncSession) -> list[UserProgress]:
    result = await session.execute(select(UserProgress).order_by(UserProgress.id))
    return list(result.scalars().all())


async def get_progress_by_user(session: AsyncSession, user_id: int) -> list[UserProgress]:
    result = await session.execute(
        select(UserProgress)
        .where(UserProgress.user_id == user_id)
        .options(selectinload(UserProgress.quiz))
        .order_by(UserProgress.id)
    )
    return list(result.scalars().all())


async def find_progress(
    session: AsyncSession, user_id: int, quiz_id: int, with_quiz: bool = False
) -> UserProgress | None:
    q = select(UserProgress).where(UserProgress.user_id == user_id, UserProgress.quiz_id == quiz_id)
    if with_quiz:
        q = q.options(selectinload(UserProgress.quiz))
    result = await session.execute(q)
    return result.scalars().one_or_none()


async def create_progress(
    session: AsyncSession, user_id: int, quiz_id: int, score: float, completed: bool
) -> UserProgress:
    progress = UserProgress(user_id=user_id, quiz_id=quiz_id, score=score, completed=completed)
    session.add(progress)
    await session.flush()
    await session.refresh(progress)
    return progress


async def raise_score(
    session: AsyncSession, user_id: int, quiz_id: int, score: float, completed: bool | None = None
) -> None:
    """Single UPDATE keeping the higher score; ``completed`` is only written when given."""
    values = {
        "score": case((UserProgress.score < score, score), else_=UserProgress.score),
        "updated_at": datetime.utcnow(),
    }
    if completed is not None:
        values["completed"] = completed
    await session.execute(
        update(UserProgress)
        .where(UserProgress.user_id == user_id, UserProgress.quiz_id == quiz_id)
        .values(**values)
        .execution_options(synchronize_session=False)
    )


async def count_completed(session: AsyncSession, user_id: int) -> int:
    result = await session.execute(
        select(func.count(UserProgress.id)).where(
            UserProgress.user_id == user_id, UserProgress.completed.is_(True)
        )
    )
    return result.scalar_one()
