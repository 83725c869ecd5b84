from datetime import datetime

from agri_edu.schemas.common import CamelModel


class QuizCreate(CamelModel):
    title: str | None = None
    description: str | None = None
    type: str | None = None


class QuizUpdate(QuizCreate):
    pass


class QuizResponse(CamelModel):
    id: int
    title: str
    description: str
    type: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class QuestionCreate(CamelModel):
    question: str | None = None
    options: list[str] | None = None
    correct_answer: int | None = None
    explanation: str | None = None
    quiz_id: int | None = None


class QuestionUpdate(QuestionCreate):
    pass


class QuestionBulkCreate(CamelModel):
    questions: list[QuestionCreate] | None = None


class QuestionResponse(CamelModel):
    id: int
    question: str
    options: list[str]
    correct_answer: int
    explanation: str
    quiz_id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None
