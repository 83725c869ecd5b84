from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from agri_edu.db.session import get_db
from agri_edu.db.repositories import quiz_repo
from agri_edu.models import Quiz
from agri_edu.schemas.common import MessageResponse
from agri_edu.schemas.quiz import QuizCreate, QuizUpdate, QuizResponse
from agri_edu.services.lookup import require_fields, ensure_education_type, get_or_404, merge_patch

router = APIRouter()


@router.get("", response_model=list[QuizResponse])
async def list_quizzes(db: AsyncSession = Depends(get_db)):
    return await quiz_repo.list_quizzes(db)


@router.get("/type/{quiz_type}", response_model=list[QuizResponse])
async def get_quizzes_by_type(quiz_type: str, db: AsyncSession = Depends(get_db)):
    ensure_education_type(quiz_type)
    return await quiz_repo.list_quizzes(db, quiz_type)


@router.get("/{quiz_id}", response_model=QuizResponse)
async def get_quiz(quiz_id: int, db: AsyncSession = Depends(get_db)):
    return await get_or_404(db, Quiz, quiz_id, "Quiz")


@router.post("", response_model=QuizResponse, status_code=status.HTTP_201_CREATED)
async def create_quiz(body: QuizCreate, db: AsyncSession = Depends(get_db)):
    require_fields(body, ["title", "description", "type"])
    ensure_education_type(body.type)
    quiz = await quiz_repo.create_quiz(db, body.title, body.description, body.type)
    await db.commit()
    return quiz


@router.put("/{quiz_id}", response_model=QuizResponse)
async def update_quiz(quiz_id: int, body: QuizUpdate, db: AsyncSession = Depends(get_db)):
    if body.type:
        ensure_education_type(body.type)
    quiz = await get_or_404(db, Quiz, quiz_id, "Quiz")
    merge_patch(quiz, body.model_dump(exclude_unset=True))
    await db.commit()
    await db.refresh(quiz)
    return quiz


@router.delete("/{quiz_id}", response_model=MessageResponse)
async def delete_quiz(quiz_id: int, db: AsyncSession = Depends(get_db)):
    quiz = await get_or_404(db, Quiz, quiz_id, "Quiz")
    await db.delete(quiz)
    await db.commit()
    return {"message": "Quiz deleted successfully"}
