from datetime import datetime
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from agri_edu.models.chat_message import ChatMessage


async def list_messages(session: AsyncSession, user_id: int | None = None) -> list[ChatMessage]:
    q = select(ChatMessage).order_by(ChatMessage.timestamp.asc(), ChatMessage.id.asc())
    if user_id is not None:
        q = q.where(ChatMessage.user_id == user_id)
    result = await session.execute(q)
    return list(result.scalars().all())


async def get_latest_messages(session: AsyncSession, user_id: int, limit: int) -> list[ChatMessage]:
    """Newest first."""
    result = await session.execute(
        select(ChatMessage)
        .where(ChatMessage.user_id == user_id)
        .order_by(ChatMessage.timestamp.desc(), ChatMessage.id.desc())
        .limit(limit)
    )
    return list(result.scalars().all())


async def create_message(session: AsyncSession, text: str, is_bot: bool, user_id: int) -> ChatMessage:
    message = ChatMessage(text=text, is_bot=is_bot, user_id=user_id, timestamp=datetime.utcnow())
    session.add(message)
    await session.flush()
    await session.refresh(message)
    return message


async def delete_messages_for_user(session: AsyncSession, user_id: int) -> int:
    result = await session.execute(delete(ChatMessage).where(ChatMessage.user_id == user_id))
    return result.rowcount
