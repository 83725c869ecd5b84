"""Animal and crop catalogue entries. Both optionally point at a quiz of their own type."""
from sqlalchemy import String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from agri_edu.db.base import Base, TimestampMixin


class Animal(TimestampMixin, Base):
    __tablename__ = "education_animals"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    icon: Mapped[str | None] = mapped_column(String(512), nullable=True)
    category: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    video_url: Mapped[str | None] = mapped_column(String(512), nullable=True)
    quiz_id: Mapped[int | None] = mapped_column(
        ForeignKey("education_quizzes.id", ondelete="SET NULL"), nullable=True
    )

    quiz = relationship("Quiz")


class Crop(TimestampMixin, Base):
    __tablename__ = "education_crops"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    icon: Mapped[str | None] = mapped_column(String(512), nullable=True)
    category: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    video_url: Mapped[str | None] = mapped_column(String(512), nullable=True)
    quiz_id: Mapped[int | None] = mapped_column(
        ForeignKey("education_quizzes.id", ondelete="SET NULL"), nullable=True
    )

    quiz = relationship("Quiz")
