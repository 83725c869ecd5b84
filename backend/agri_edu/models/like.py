import enum
from sqlalchemy import String, ForeignKey, Integer, UniqueConstraint, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from agri_edu.db.base import Base, TimestampMixin


class ContentKind(str, enum.Enum):
    question = "question"
    reply = "reply"


class Like(TimestampMixin, Base):
    """Junction row: one user likes one question or reply."""

    __tablename__ = "education_likes"
    __table_args__ = (
        UniqueConstraint("user_id", "content_type", "content_id", name="education_like_unique_constraint"),
        Index("ix_education_likes_content", "content_type", "content_id"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    content_type: Mapped[str] = mapped_column(String(16), nullable=False)  # ContentKind
    content_id: Mapped[int] = mapped_column(Integer, nullable=False)

    user = relationship("User", back_populates="likes")
