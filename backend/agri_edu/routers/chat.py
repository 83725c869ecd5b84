from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from agri_edu.db.session import get_db
from agri_edu.db.repositories import chat_repo
from agri_edu.dependencies import get_chat_service
from agri_edu.schemas.chat import ChatMessageCreate, ChatMessageResponse
from agri_edu.schemas.common import MessageResponse, OwnerRequest
from agri_edu.services.chat_service import ChatService
from agri_edu.services.lookup import require_fields

router = APIRouter()


@router.get("", response_model=list[ChatMessageResponse])
async def list_messages(db: AsyncSession = Depends(get_db)):
    return await chat_repo.list_messages(db)


@router.get("/user/{user_id}", response_model=list[ChatMessageResponse])
async def get_messages_by_user(user_id: int, db: AsyncSession = Depends(get_db)):
    return await chat_repo.list_messages(db, user_id)


@router.get("/latest/{user_id}", response_model=list[ChatMessageResponse])
async def get_latest_conversation(user_id: int, chat: ChatService = Depends(get_chat_service)):
    return await chat.latest(user_id)


@router.post("", response_model=ChatMessageResponse, status_code=status.HTTP_201_CREATED)
async def create_message(
    body: ChatMessageCreate,
    db: AsyncSession = Depends(get_db),
    chat: ChatService = Depends(get_chat_service),
):
    require_fields(body, ["text", "isBot", "userId"])
    message = await chat.create(body.text, body.is_bot, body.user_id)
    await db.commit()
    return message


@router.delete("/clear/{user_id}", response_model=MessageResponse)
async def clear_chat_history(
    user_id: int,
    db: AsyncSession = Depends(get_db),
    chat: ChatService = Depends(get_chat_service),
):
    await chat.clear(user_id)
    await db.commit()
    return {"message": "Chat history cleared successfully"}


@router.delete("/{message_id}", response_model=MessageResponse)
async def delete_message(
    message_id: int,
    body: OwnerRequest | None = None,
    db: AsyncSession = Depends(get_db),
    chat: ChatService = Depends(get_chat_service),
):
    await chat.delete(message_id, body.user_id if body else None)
    await db.commit()
    return {"message": "Message deleted successfully"}
