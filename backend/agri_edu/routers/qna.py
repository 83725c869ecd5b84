"""Questions asked under an educational video."""
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from agri_edu.db.session import get_db
from agri_edu.db.repositories import discussion_repo
from agri_edu.dependencies import get_like_service
from agri_edu.errors import NotFound
from agri_edu.models import ContentKind, QuestionAndAnswer, Video
from agri_edu.schemas.common import MessageResponse, OwnerRequest
from agri_edu.schemas.discussion import QnACreate, QnAUpdate, QnAResponse, QnAWithRepliesResponse
from agri_edu.schemas.like import LikeStateResponse
from agri_edu.services.authz import ensure_owner
from agri_edu.services.like_service import LikeService
from agri_edu.services.lookup import require_fields, get_or_404

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=list[QnAResponse])
async def list_qnas(db: AsyncSession = Depends(get_db)):
    return await discussion_repo.list_qnas(db)


@router.get("/video/{video_id}", response_model=list[QnAWithRepliesResponse])
async def get_qnas_by_video(video_id: int, db: AsyncSession = Depends(get_db)):
    await get_or_404(db, Video, video_id, "Video")
    return await discussion_repo.get_qnas_by_video(db, video_id)


@router.get("/user/{user_id}", response_model=list[QnAWithRepliesResponse])
async def get_qnas_by_user(user_id: int, db: AsyncSession = Depends(get_db)):
    return await discussion_repo.get_qnas_by_user(db, user_id)


@router.get("/{qna_id}", response_model=QnAWithRepliesResponse)
async def get_qna(qna_id: int, db: AsyncSession = Depends(get_db)):
    qna = await discussion_repo.get_qna_with_replies(db, qna_id)
    if not qna:
        raise NotFound("Question and answer not found")
    return qna


@router.post("", response_model=QnAResponse, status_code=status.HTTP_201_CREATED)
async def create_qna(body: QnACreate, db: AsyncSession = Depends(get_db)):
    require_fields(body, ["text", "authorName", "authorImage", "videoId"])
    await get_or_404(db, Video, body.video_id, "Video")
    qna = await discussion_repo.create_qna(
        db,
        body.text,
        body.author_name,
        body.author_image,
        body.video_id,
        user_id=body.user_id,
        timestamp=body.timestamp,
    )
    await db.commit()
    return qna


@router.put("/{qna_id}/toggle-like", response_model=LikeStateResponse)
async def toggle_qna_like(
    qna_id: int,
    body: OwnerRequest,
    db: AsyncSession = Depends(get_db),
    likes: LikeService = Depends(get_like_service),
):
    require_fields(body, ["userId"])
    state = await likes.toggle_like(body.user_id, ContentKind.question, qna_id)
    await db.commit()
    return state


@router.put("/{qna_id}", response_model=QnAResponse)
async def update_qna(qna_id: int, body: QnAUpdate, db: AsyncSession = Depends(get_db)):
    require_fields(body, ["text", "userId"])
    qna = await get_or_404(db, QuestionAndAnswer, qna_id, "Question and answer")
    ensure_owner(qna, body.user_id, "Unauthorized: Only the owner can update this question")
    qna.text = body.text
    await db.commit()
    await db.refresh(qna)
    return qna


@router.delete("/{qna_id}", response_model=MessageResponse)
async def delete_qna(
    qna_id: int,
    body: OwnerRequest | None = None,
    db: AsyncSession = Depends(get_db),
    likes: LikeService = Depends(get_like_service),
):
    require_fields(body or {}, ["userId"])
    qna = await discussion_repo.get_qna_with_replies(db, qna_id)
    if not qna:
        raise NotFound("Question and answer not found")
    ensure_owner(qna, body.user_id, "Unauthorized: Only the owner can delete this question")
    for reply in qna.replies:
        await likes.forget_content(ContentKind.reply, reply.id)
    await likes.forget_content(ContentKind.question, qna.id)
    await db.delete(qna)
    await db.commit()
    logger.info(f"QnA {qna_id} deleted by user {body.user_id}")
    return {"message": "Question and answer deleted successfully"}
