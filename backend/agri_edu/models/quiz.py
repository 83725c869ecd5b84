from sqlalchemy import String, Text, ForeignKey, JSON, Integer
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship

from agri_edu.db.base import Base, TimestampMixin


class Quiz(TimestampMixin, Base):
    __tablename__ = "education_quizzes"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(String(16), nullable=False)  # EducationType

    questions = relationship("QuizQuestion", back_populates="quiz", cascade="all, delete-orphan")
    progress = relationship("UserProgress", back_populates="quiz", cascade="all, delete-orphan")


class QuizQuestion(TimestampMixin, Base):
    __tablename__ = "education_questions"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    question: Mapped[str] = mapped_column(Text, nullable=False)
    options: Mapped[list] = mapped_column(JSON().with_variant(JSONB, "postgresql"), nullable=False)
    correct_answer: Mapped[int] = mapped_column(Integer, nullable=False)  # index into options
    explanation: Mapped[str] = mapped_column(Text, nullable=False, default="")
    quiz_id: Mapped[int] = mapped_column(
        ForeignKey("education_quizzes.id", ondelete="CASCADE"), nullable=False, index=True
    )

    quiz = relationship("Quiz", back_populates="questions")
