from datetime import datetime
from sqlalchemy import String, Text, DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from agri_edu.db.base import Base, TimestampMixin


class QuestionAndAnswer(TimestampMixin, Base):
    __tablename__ = "education_questions_and_answers"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    author_name: Mapped[str] = mapped_column(String(255), nullable=False)
    author_image: Mapped[str] = mapped_column(String(512), nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=datetime.utcnow)
    video_id: Mapped[int] = mapped_column(
        ForeignKey("education_videos.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)

    video = relationship("Video", back_populates="questions_and_answers")
    replies = relationship(
        "Reply",
        back_populates="question_and_answer",
        cascade="all, delete-orphan",
        order_by="Reply.timestamp",
    )


class Reply(TimestampMixin, Base):
    __tablename__ = "education_replies"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    author_name: Mapped[str] = mapped_column(String(255), nullable=False)
    author_image: Mapped[str] = mapped_column(String(512), nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=datetime.utcnow)
    question_and_answer_id: Mapped[int] = mapped_column(
        ForeignKey("education_questions_and_answers.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)

    question_and_answer = relationship("QuestionAndAnswer", back_populates="replies")
