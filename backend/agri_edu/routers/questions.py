"""Multiple-choice questions belonging to a quiz."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from agri_edu.db.session import get_db
from agri_edu.db.repositories import quiz_repo
from agri_edu.errors import BadRequest
from agri_edu.models import Quiz, QuizQuestion
from agri_edu.schemas.common import MessageResponse
from agri_edu.schemas.quiz import QuestionCreate, QuestionUpdate, QuestionBulkCreate, QuestionResponse
from agri_edu.services.lookup import require_fields, get_or_404, merge_patch

router = APIRouter()

QUESTION_FIELDS = ["question", "options", "correctAnswer", "quizId"]


def _check_options(options: list[str] | None) -> None:
    if not isinstance(options, list) or len(options) < 2:
        raise BadRequest("Options must be an array with at least 2 items")


def _check_answer_index(correct_answer: int, options: list[str]) -> None:
    if correct_answer < 0 or correct_answer >= len(options):
        raise BadRequest("CorrectAnswer must be a valid index in the options array")


def _validate_new_question(body: QuestionCreate) -> None:
    require_fields(body, QUESTION_FIELDS)
    _check_options(body.options)
    _check_answer_index(body.correct_answer, body.options)


def _row(body: QuestionCreate) -> dict:
    return {
        "question": body.question,
        "options": body.options,
        "correct_answer": body.correct_answer,
        "explanation": body.explanation or "",
        "quiz_id": body.quiz_id,
    }


@router.get("", response_model=list[QuestionResponse])
async def list_questions(db: AsyncSession = Depends(get_db)):
    return await quiz_repo.list_questions(db)


@router.get("/quiz/{quiz_id}", response_model=list[QuestionResponse])
async def get_questions_by_quiz(quiz_id: int, db: AsyncSession = Depends(get_db)):
    await get_or_404(db, Quiz, quiz_id, "Quiz")
    return await quiz_repo.list_questions(db, quiz_id)


@router.get("/{question_id}", response_model=QuestionResponse)
async def get_question(question_id: int, db: AsyncSession = Depends(get_db)):
    return await get_or_404(db, QuizQuestion, question_id, "Question")


@router.post("", response_model=QuestionResponse, status_code=status.HTTP_201_CREATED)
async def create_question(body: QuestionCreate, db: AsyncSession = Depends(get_db)):
    _validate_new_question(body)
    await get_or_404(db, Quiz, body.quiz_id, "Quiz")
    created = await quiz_repo.create_questions(db, [_row(body)])
    await db.commit()
    return created[0]


@router.post("/bulk", response_model=list[QuestionResponse], status_code=status.HTTP_201_CREATED)
async def bulk_create_questions(body: QuestionBulkCreate, db: AsyncSession = Depends(get_db)):
    """All questions are validated before any row is written."""
    if not body.questions:
        raise BadRequest("Questions must be a non-empty array")
    for question in body.questions:
        _validate_new_question(question)
        await get_or_404(db, Quiz, question.quiz_id, "Quiz")
    created = await quiz_repo.create_questions(db, [_row(q) for q in body.questions])
    await db.commit()
    return created


@router.put("/{question_id}", response_model=QuestionResponse)
async def update_question(question_id: int, body: QuestionUpdate, db: AsyncSession = Depends(get_db)):
    record = await get_or_404(db, QuizQuestion, question_id, "Question")
    if body.quiz_id is not None:
        await get_or_404(db, Quiz, body.quiz_id, "Quiz")
    if body.options is not None:
        _check_options(body.options)
    if body.correct_answer is not None:
        _check_answer_index(body.correct_answer, body.options if body.options is not None else record.options)
    elif body.options is not None:
        # stored answer must still point inside the new options
        _check_answer_index(record.correct_answer, body.options)
    merge_patch(record, body.model_dump(exclude_unset=True))
    await db.commit()
    await db.refresh(record)
    return record


@router.delete("/{question_id}", response_model=MessageResponse)
async def delete_question(question_id: int, db: AsyncSession = Depends(get_db)):
    record = await get_or_404(db, QuizQuestion, question_id, "Question")
    await db.delete(record)
    await db.commit()
    return {"message": "Question deleted successfully"}
