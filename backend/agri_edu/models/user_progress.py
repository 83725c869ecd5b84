from sqlalchemy import Boolean, Float, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from agri_edu.db.base import Base, TimestampMixin


class UserProgress(TimestampMixin, Base):
    __tablename__ = "education_user_progress"
    __table_args__ = (
        UniqueConstraint("user_id", "quiz_id", name="education_user_progress_unique_constraint"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    quiz_id: Mapped[int] = mapped_column(
        ForeignKey("education_quizzes.id", ondelete="CASCADE"), nullable=False
    )
    score: Mapped[float] = mapped_column(Float, nullable=False)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    quiz = relationship("Quiz", back_populates="progress")
