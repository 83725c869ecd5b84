from sqlalchemy import select
from sqlalchemy.orm import selectinload
from sqlalchemy.ext.asyncio import AsyncSession

from agri_edu.models.video import Video
from agri_edu.models.additional_video import AdditionalVideo
from agri_edu.models.discussion import QuestionAndAnswer


async def list_videos(session: AsyncSession) -> list[Video]:
    result = await session.execute(select(Video).order_by(Video.id))
    return list(result.scalars().all())


async def get_video_with_children(session: AsyncSession, video_id: int) -> Video | None:
    result = await session.execute(
        select(Video)
        .where(Video.id == video_id)
        .options(
            selectinload(Video.additional_videos),
            selectinload(Video.questions_and_answers).selectinload(QuestionAndAnswer.replies),
        )
    )
    return result.scalars().one_or_none()


async def get_videos_by_category(session: AsyncSession, category: str) -> list[Video]:
    result = await session.execute(select(Video).where(Video.category == category).order_by(Video.id))
    return list(result.scalars().all())


async def get_videos_by_type(session: AsyncSession, video_type: str) -> list[Video]:
    result = await session.execute(select(Video).where(Video.type == video_type).order_by(Video.id))
    return list(result.scalars().all())


async def search_videos(session: AsyncSession, query: str) -> list[Video]:
    result = await session.execute(
        select(Video).where(Video.title.ilike(f"%{query}%")).order_by(Video.id)
    )
    return list(result.scalars().all())


async def create_video(
    session: AsyncSession, title: str, category: str, video_type: str, youtube_id: str | None = None
) -> Video:
    video = Video(title=title, category=category, type=video_type, youtube_id=youtube_id)
    session.add(video)
    await session.flush()
    await session.refresh(video)
    return video


async def list_additional_videos(session: AsyncSession, video_id: int | None = None) -> list[AdditionalVideo]:
    q = select(AdditionalVideo).order_by(AdditionalVideo.id)
    if video_id is not None:
        q = q.where(AdditionalVideo.video_id == video_id)
    result = await session.execute(q)
    return list(result.scalars().all())


async def create_additional_video(
    session: AsyncSession, title: str, youtube_id: str, video_id: int
) -> AdditionalVideo:
    extra = AdditionalVideo(title=title, youtube_id=youtube_id, video_id=video_id)
    session.add(extra)
    await session.flush()
    await session.refresh(extra)
    return extra
