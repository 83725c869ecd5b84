from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from agri_edu.db.session import get_db
from agri_edu.db.repositories import progress_repo
from agri_edu.dependencies import get_progress_service
from agri_edu.errors import NotFound
from agri_edu.models import UserProgress
from agri_edu.schemas.common import MessageResponse
from agri_edu.schemas.progress import (
    ProgressRequest,
    ProgressResponse,
    ProgressWithQuizResponse,
    CompletedCountResponse,
)
from agri_edu.services.lookup import require_fields, get_or_404
from agri_edu.services.progress_service import ProgressService

router = APIRouter()


@router.get("", response_model=list[ProgressResponse])
async def list_progress(db: AsyncSession = Depends(get_db)):
    return await progress_repo.list_progress(db)


@router.get("/user/{user_id}", response_model=list[ProgressWithQuizResponse])
async def get_progress_by_user(user_id: int, db: AsyncSession = Depends(get_db)):
    return await progress_repo.get_progress_by_user(db, user_id)


@router.get("/user/{user_id}/completed-count", response_model=CompletedCountResponse)
async def get_completed_quizzes_count(
    user_id: int, progress: ProgressService = Depends(get_progress_service)
):
    return {"user_id": user_id, "completed_quizzes": await progress.completed_count(user_id)}


@router.get("/user/{user_id}/quiz/{quiz_id}", response_model=ProgressWithQuizResponse)
async def get_progress_for_quiz(user_id: int, quiz_id: int, db: AsyncSession = Depends(get_db)):
    row = await progress_repo.find_progress(db, user_id, quiz_id, with_quiz=True)
    if not row:
        raise NotFound("User progress for this quiz not found")
    return row


@router.get("/{progress_id}", response_model=ProgressResponse)
async def get_progress(progress_id: int, db: AsyncSession = Depends(get_db)):
    return await get_or_404(db, UserProgress, progress_id, "User progress")


@router.post("", response_model=ProgressResponse)
async def create_or_update_progress(
    body: ProgressRequest,
    db: AsyncSession = Depends(get_db),
    progress: ProgressService = Depends(get_progress_service),
):
    """Upsert keyed by (userId, quizId). 200 for both create and update."""
    require_fields(body, ["userId", "quizId", "score"])
    row = await progress.create_or_update(body.user_id, body.quiz_id, body.score, body.completed)
    await db.commit()
    return row


@router.delete("/{progress_id}", response_model=MessageResponse)
async def delete_progress(progress_id: int, db: AsyncSession = Depends(get_db)):
    row = await get_or_404(db, UserProgress, progress_id, "User progress")
    await db.delete(row)
    await db.commit()
    return {"message": "User progress deleted successfully"}
