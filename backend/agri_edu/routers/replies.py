import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from agri_edu.db.session import get_db
from agri_edu.db.repositories import discussion_repo
from agri_edu.dependencies import get_like_service
from agri_edu.models import ContentKind, QuestionAndAnswer, Reply
from agri_edu.schemas.common import MessageResponse, OwnerRequest
from agri_edu.schemas.discussion import ReplyCreate, ReplyUpdate, ReplyResponse
from agri_edu.schemas.like import LikeStateResponse
from agri_edu.services.authz import ensure_owner
from agri_edu.services.like_service import LikeService
from agri_edu.services.lookup import require_fields, get_or_404

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=list[ReplyResponse])
async def list_replies(db: AsyncSession = Depends(get_db)):
    return await discussion_repo.list_replies(db)


@router.get("/qna/{qna_id}", response_model=list[ReplyResponse])
async def get_replies_by_qna(qna_id: int, db: AsyncSession = Depends(get_db)):
    await get_or_404(db, QuestionAndAnswer, qna_id, "Question and answer")
    return await discussion_repo.get_replies_by_qna(db, qna_id)


@router.get("/user/{user_id}", response_model=list[ReplyResponse])
async def get_replies_by_user(user_id: int, db: AsyncSession = Depends(get_db)):
    return await discussion_repo.get_replies_by_user(db, user_id)


@router.get("/{reply_id}", response_model=ReplyResponse)
async def get_reply(reply_id: int, db: AsyncSession = Depends(get_db)):
    return await get_or_404(db, Reply, reply_id, "Reply")


@router.post("", response_model=ReplyResponse, status_code=status.HTTP_201_CREATED)
async def create_reply(body: ReplyCreate, db: AsyncSession = Depends(get_db)):
    require_fields(body, ["text", "authorName", "authorImage", "questionAndAnswerId"])
    await get_or_404(db, QuestionAndAnswer, body.question_and_answer_id, "Question and answer")
    reply = await discussion_repo.create_reply(
        db,
        body.text,
        body.author_name,
        body.author_image,
        body.question_and_answer_id,
        user_id=body.user_id,
        timestamp=body.timestamp,
    )
    await db.commit()
    return reply


@router.put("/{reply_id}/toggle-like", response_model=LikeStateResponse)
async def toggle_reply_like(
    reply_id: int,
    body: OwnerRequest,
    db: AsyncSession = Depends(get_db),
    likes: LikeService = Depends(get_like_service),
):
    require_fields(body, ["userId"])
    state = await likes.toggle_like(body.user_id, ContentKind.reply, reply_id)
    await db.commit()
    return state


@router.put("/{reply_id}", response_model=ReplyResponse)
async def update_reply(reply_id: int, body: ReplyUpdate, db: AsyncSession = Depends(get_db)):
    require_fields(body, ["text", "userId"])
    reply = await get_or_404(db, Reply, reply_id, "Reply")
    ensure_owner(reply, body.user_id, "Unauthorized: Only the owner can update this reply")
    reply.text = body.text
    await db.commit()
    await db.refresh(reply)
    return reply


@router.delete("/{reply_id}", response_model=MessageResponse)
async def delete_reply(
    reply_id: int,
    body: OwnerRequest | None = None,
    db: AsyncSession = Depends(get_db),
    likes: LikeService = Depends(get_like_service),
):
    require_fields(body or {}, ["userId"])
    reply = await get_or_404(db, Reply, reply_id, "Reply")
    ensure_owner(reply, body.user_id, "Unauthorized: Only the owner can delete this reply")
    await likes.forget_content(ContentKind.reply, reply.id)
    await db.delete(reply)
    await db.commit()
    logger.info(f"Reply {reply_id} deleted by user {body.user_id}")
    return {"message": "Reply deleted successfully"}
