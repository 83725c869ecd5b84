from datetime import datetime
from sqlalchemy import Boolean, DateTime, Integer, Text, Index
from sqlalchemy.orm import Mapped, mapped_column

from agri_edu.db.base import Base, TimestampMixin


class ChatMessage(TimestampMixin, Base):
    __tablename__ = "education_chat_messages"
    __table_args__ = (Index("ix_education_chat_messages_user_ts", "user_id", "timestamp"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    is_bot: Mapped[bool] = mapped_column(Boolean, nullable=False)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=datetime.utcnow)
