import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from agri_edu.db.repositories import progress_repo
from agri_edu.models import Quiz, UserProgress
from agri_edu.services.lookup import get_or_404

logger = logging.getLogger(__name__)


class ProgressService:
    """Best score per (user, quiz). The stored score never decreases."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_or_update(
        self, user_id: int, quiz_id: int, score: float, completed: bool | None = None
    ) -> UserProgress:
        await get_or_404(self.db, Quiz, quiz_id, "Quiz")
        progress = await progress_repo.find_progress(self.db, user_id, quiz_id)
        if progress is None:
            try:
                progress = await progress_repo.create_progress(
                    self.db, user_id, quiz_id, score, completed if completed is not None else False
                )
                logger.info(f"Progress created: user={user_id} quiz={quiz_id} score={score}")
                return progress
            except IntegrityError:
                # another request created the row first; fall through to the update path
                await self.db.rollback()
                progress = await progress_repo.find_progress(self.db, user_id, quiz_id)
                if progress is None:
                    raise

        if score > progress.score or completed is not None:
            await progress_repo.raise_score(self.db, user_id, quiz_id, score, completed)
            await self.db.refresh(progress)
            logger.info(f"Progress updated: user={user_id} quiz={quiz_id} score={progress.score}")
        return progress

    async def completed_count(self, user_id: int) -> int:
        return await progress_repo.count_completed(self.db, user_id)
