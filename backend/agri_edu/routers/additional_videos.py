from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from agri_edu.db.session import get_db
from agri_edu.db.repositories import video_repo
from agri_edu.models import AdditionalVideo, Video
from agri_edu.schemas.common import MessageResponse
from agri_edu.schemas.video import AdditionalVideoCreate, AdditionalVideoUpdate, AdditionalVideoResponse
from agri_edu.services.lookup import require_fields, get_or_404, merge_patch

router = APIRouter()


@router.get("", response_model=list[AdditionalVideoResponse])
async def list_additional_videos(db: AsyncSession = Depends(get_db)):
    return await video_repo.list_additional_videos(db)


@router.get("/video/{video_id}", response_model=list[AdditionalVideoResponse])
async def get_additional_videos_by_video(video_id: int, db: AsyncSession = Depends(get_db)):
    await get_or_404(db, Video, video_id, "Main video")
    return await video_repo.list_additional_videos(db, video_id)


@router.get("/{extra_id}", response_model=AdditionalVideoResponse)
async def get_additional_video(extra_id: int, db: AsyncSession = Depends(get_db)):
    return await get_or_404(db, AdditionalVideo, extra_id, "Additional video")


@router.post("", response_model=AdditionalVideoResponse, status_code=status.HTTP_201_CREATED)
async def create_additional_video(body: AdditionalVideoCreate, db: AsyncSession = Depends(get_db)):
    require_fields(body, ["title", "youtubeId", "videoId"])
    await get_or_404(db, Video, body.video_id, "Main video")
    extra = await video_repo.create_additional_video(db, body.title, body.youtube_id, body.video_id)
    await db.commit()
    return extra


@router.put("/{extra_id}", response_model=AdditionalVideoResponse)
async def update_additional_video(
    extra_id: int, body: AdditionalVideoUpdate, db: AsyncSession = Depends(get_db)
):
    extra = await get_or_404(db, AdditionalVideo, extra_id, "Additional video")
    if body.video_id is not None:
        await get_or_404(db, Video, body.video_id, "Main video")
    merge_patch(extra, body.model_dump(exclude_unset=True))
    await db.commit()
    await db.refresh(extra)
    return extra


@router.delete("/{extra_id}", response_model=MessageResponse)
async def delete_additional_video(extra_id: int, db: AsyncSession = Depends(get_db)):
    extra = await get_or_404(db, AdditionalVideo, extra_id, "Additional video")
    await db.delete(extra)
    await db.commit()
    return {"message": "Additional video deleted successfully"}
