from datetime import datetime

from agri_edu.schemas.common import CamelModel
from agri_edu.schemas.quiz import QuizResponse


class ProgressRequest(CamelModel):
    user_id: int | None = None
    quiz_id: int | None = None
    score: float | None = None
    completed: bool | None = None


class ProgressResponse(CamelModel):
    id: int
    user_id: int
    quiz_id: int
    score: float
    completed: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProgressWithQuizResponse(ProgressResponse):
    quiz: QuizResponse | None = None


class CompletedCountResponse(CamelModel):
    user_id: int
    completed_quizzes: int
