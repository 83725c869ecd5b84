from sqlalchemy import String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from agri_edu.db.base import Base, TimestampMixin


class AdditionalVideo(TimestampMixin, Base):
    __tablename__ = "education_additional_videos"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    youtube_id: Mapped[str] = mapped_column(String(64), nullable=False)
    video_id: Mapped[int] = mapped_column(
        ForeignKey("education_videos.id", ondelete="CASCADE"), nullable=False, index=True
    )

    video = relationship("Video", back_populates="additional_videos")
