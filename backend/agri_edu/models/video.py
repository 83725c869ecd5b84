import enum
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from agri_edu.db.base import Base, TimestampMixin


class EducationType(str, enum.Enum):
    animal = "animal"
    crop = "crop"


class Video(TimestampMixin, Base):
    __tablename__ = "education_videos"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    youtube_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    type: Mapped[str] = mapped_column(String(16), nullable=False)  # EducationType

    additional_videos = relationship(
        "AdditionalVideo", back_populates="video", cascade="all, delete-orphan"
    )
    questions_and_answers = relationship(
        "QuestionAndAnswer", back_populates="video", cascade="all, delete-orphan"
    )
