from datetime import datetime
from sqlalchemy import select
from sqlalchemy.orm import selectinload
from sqlalchemy.ext.asyncio import AsyncSession

from agri_edu.models.discussion import QuestionAndAnswer, Reply


async def list_qnas(session: AsyncSession) -> list[QuestionAndAnswer]:
    result = await session.execute(select(QuestionAndAnswer).order_by(QuestionAndAnswer.id))
    return list(result.scalars().all())


async def get_qna_with_replies(session: AsyncSession, qna_id: int) -> QuestionAndAnswer | None:
    result = await session.execute(
        select(QuestionAndAnswer)
        .where(QuestionAndAnswer.id == qna_id)
        .options(selectinload(QuestionAndAnswer.replies))
    )
    return result.scalars().one_or_none()


async def get_qnas_by_video(session: AsyncSession, video_id: int) -> list[QuestionAndAnswer]:
    result = await session.execute(
        select(QuestionAndAnswer)
        .where(QuestionAndAnswer.video_id == video_id)
        .options(selectinload(QuestionAndAnswer.replies))
        .order_by(QuestionAndAnswer.timestamp.desc(), QuestionAndAnswer.id.desc())
    )
    return list(result.scalars().all())


async def get_qnas_by_user(session: AsyncSession, user_id: int) -> list[QuestionAndAnswer]:
    result = await session.execute(
        select(QuestionAndAnswer)
        .where(QuestionAndAnswer.user_id == user_id)
        .options(selectinload(QuestionAndAnswer.replies))
        .order_by(QuestionAndAnswer.timestamp.desc(), QuestionAndAnswer.id.desc())
    )
    return list(result.scalars().all())


async def create_qna(
    session: AsyncSession,
    text: str,
    author_name: str,
    author_image: str,
    video_id: int,
    user_id: int | None = None,
    timestamp: datetime | None = None,
) -> QuestionAndAnswer:
    qna = QuestionAndAnswer(
        text=text,
        author_name=author_name,
        author_image=author_image,
        video_id=video_id,
        user_id=user_id,
        timestamp=timestamp or datetime.utcnow(),
    )
    session.add(qna)
    await session.flush()
    await session.refresh(qna)
    return qna


async def list_replies(session: AsyncSession) -> list[Reply]:
    result = await session.execute(select(Reply).order_by(Reply.id))
    return list(result.scalars().all())


async def get_replies_by_qna(session: AsyncSession, qna_id: int) -> list[Reply]:
    # oldest first for conversation flow
    result = await session.execute(
        select(Reply)
        .where(Reply.question_and_answer_id == qna_id)
        .order_by(Reply.timestamp.asc(), Reply.id.asc())
    )
    return list(result.scalars().all())


async def get_replies_by_user(session: AsyncSession, user_id: int) -> list[Reply]:
    result = await session.execute(
        select(Reply).where(Reply.user_id == user_id).order_by(Reply.timestamp.desc(), Reply.id.desc())
    )
    return list(result.scalars().all())


async def create_reply(
    session: AsyncSession,
    text: str,
    author_name: str,
    author_image: str,
    question_and_answer_id: int,
    user_id: int | None = None,
    timestamp: datetime | None = None,
) -> Reply:
    reply = Reply(
        text=text,
        author_name=author_name,
        author_image=author_image,
        question_and_answer_id=question_and_answer_id,
        user_id=user_id,
        timestamp=timestamp or datetime.utcnow(),
    )
    session.add(reply)
    await session.flush()
    await session.refresh(reply)
    return reply
