import logging

from sqlalchemy.ext.asyncio import AsyncSession

from agri_edu.db.repositories import chat_repo
from agri_edu.models import ChatMessage
from agri_edu.services.authz import ensure_owner
from agri_edu.services.lookup import get_or_404

logger = logging.getLogger(__name__)

class ChatService:
    def __init__(self, db: AsyncSession, window: int):
        self.db = db
        self.window = window

    async def create(self, text: str, is_bot: bool, user_id: int) -> ChatMessage:
        return await chat_repo.create_message(self.db, text, is_bot, user_id)

    async def latest(self, user_id: int) -> list[ChatMessage]:
        """Last ``window`` messages, oldest first."""
        newest_first = await chat_repo.get_latest_messages(self.db, user_id, self.window)
        return list(reversed(newest_first))

    async def delete(self, message_id: int, user_id: int | None) -> None:
        message = await get_or_404(self.db, ChatMessage, message_id, "Message")
        ensure_owner(message, user_id, "Not authorized to delete this message")
        await self.db.delete(message)

    async def clear(self, user_id: int) -> int:
        deleted = await chat_repo.delete_messages_for_user(self.db, user_id)
        logger.info(f"Chat history cleared: user={user_id} messages={deleted}")
        return deleted
