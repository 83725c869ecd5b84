from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from agri_edu.db.session import get_db
from agri_edu.services.chat_service import ChatService
from agri_edu.services.like_service import LikeService
from agri_edu.services.progress_service import ProgressService


def get_like_service(db: AsyncSession = Depends(get_db)) -> LikeService:
    return LikeService(db)


def get_progress_service(db: AsyncSession = Depends(get_db)) -> ProgressService:
    return ProgressService(db)


def get_chat_service(request: Request, db: AsyncSession = Depends(get_db)) -> ChatService:
    return ChatService(db, window=request.app.state.settings.chat_history_window)
