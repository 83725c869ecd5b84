from datetime import datetime

from agri_edu.schemas.common import CamelModel


class QnACreate(CamelModel):
    text: str | None = None
    author_name: str | None = None
    author_image: str | None = None
    timestamp: datetime | None = None
    video_id: int | None = None
    user_id: int | None = None


class QnAUpdate(CamelModel):
    text: str | None = None
    user_id: int | None = None


class ReplyCreate(CamelModel):
    text: str | None = None
    author_name: str | None = None
    author_image: str | None = None
    timestamp: datetime | None = None
    question_and_answer_id: int | None = None
    user_id: int | None = None


class ReplyUpdate(QnAUpdate):
    pass


class ReplyResponse(CamelModel):
    id: int
    text: str
    author_name: str
    author_image: str
    timestamp: datetime
    question_and_answer_id: int
    user_id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class QnAResponse(CamelModel):
    id: int
    text: str
    author_name: str
    author_image: str
    timestamp: datetime
    video_id: int
    user_id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class QnAWithRepliesResponse(QnAResponse):
    replies: list[ReplyResponse] = []
