from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from agri_edu.db.session import get_db
from agri_edu.db.repositories import video_repo
from agri_edu.dependencies import get_like_service
from agri_edu.errors import BadRequest, NotFound
from agri_edu.models import ContentKind, Video
from agri_edu.schemas.common import MessageResponse
from agri_edu.schemas.video import VideoCreate, VideoUpdate, VideoResponse, VideoDetailResponse
from agri_edu.services.like_service import LikeService
from agri_edu.services.lookup import require_fields, ensure_education_type, get_or_404, merge_patch

router = APIRouter()


@router.get("", response_model=list[VideoResponse])
async def list_videos(db: AsyncSession = Depends(get_db)):
    return await video_repo.list_videos(db)


@router.get("/search", response_model=list[VideoResponse])
async def search_videos(query: str | None = None, db: AsyncSession = Depends(get_db)):
    """Case-insensitive substring match on the title."""
    if not query:
        raise BadRequest("Search query is required")
    return await video_repo.search_videos(db, query)


@router.get("/category/{category}", response_model=list[VideoResponse])
async def get_videos_by_category(category: str, db: AsyncSession = Depends(get_db)):
    return await video_repo.get_videos_by_category(db, category)


@router.get("/type/{video_type}", response_model=list[VideoResponse])
async def get_videos_by_type(video_type: str, db: AsyncSession = Depends(get_db)):
    ensure_education_type(video_type)
    return await video_repo.get_videos_by_type(db, video_type)


@router.get("/{video_id}", response_model=VideoDetailResponse)
async def get_video(video_id: int, db: AsyncSession = Depends(get_db)):
    video = await video_repo.get_video_with_children(db, video_id)
    if not video:
        raise NotFound("Video not found")
    return video


@router.post("", response_model=VideoResponse, status_code=status.HTTP_201_CREATED)
async def create_video(body: VideoCreate, db: AsyncSession = Depends(get_db)):
    require_fields(body, ["title", "category", "type"])
    ensure_education_type(body.type)
    video = await video_repo.create_video(db, body.title, body.category, body.type, body.youtube_id)
    await db.commit()
    return video


@router.put("/{video_id}", response_model=VideoResponse)
async def update_video(video_id: int, body: VideoUpdate, db: AsyncSession = Depends(get_db)):
    if body.type:
        ensure_education_type(body.type)
    video = await get_or_404(db, Video, video_id, "Video")
    merge_patch(video, body.model_dump(exclude_unset=True))
    await db.commit()
    await db.refresh(video)
    return video


@router.delete("/{video_id}", response_model=MessageResponse)
async def delete_video(
    video_id: int,
    db: AsyncSession = Depends(get_db),
    likes: LikeService = Depends(get_like_service),
):
    video = await video_repo.get_video_with_children(db, video_id)
    if not video:
        raise NotFound("Video not found")
    for qna in video.questions_and_answers:
        for reply in qna.replies:
            await likes.forget_content(ContentKind.reply, reply.id)
        await likes.forget_content(ContentKind.question, qna.id)
    await db.delete(video)
    await db.commit()
    return {"message": "Video deleted successfully"}
