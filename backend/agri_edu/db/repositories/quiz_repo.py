from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from agri_edu.models.quiz import Quiz, QuizQuestion


async def list_quizzes(session: AsyncSession, quiz_type: str | None = None) -> list[Quiz]:
    q = select(Quiz).order_by(Quiz.id)
    if quiz_type is not None:
        q = q.where(Quiz.type == quiz_type)
    result = await session.execute(q)
    return list(result.scalars().all())


async def create_quiz(session: AsyncSession, title: str, description: str, quiz_type: str) -> Quiz:
    quiz = Quiz(title=title, description=description, type=quiz_type)
    session.add(quiz)
    await session.flush()
    await session.refresh(quiz)
    return quiz


async def list_questions(session: AsyncSession, quiz_id: int | None = None) -> list[QuizQuestion]:
    q = select(QuizQuestion).order_by(QuizQuestion.id)
    if quiz_id is not None:
        q = q.where(QuizQuestion.quiz_id == quiz_id)
    result = await session.execute(q)
    return list(result.scalars().all())


async def create_questions(session: AsyncSession, rows: list[dict]) -> list[QuizQuestion]:
    questions = [QuizQuestion(**row) for row in rows]
    session.add_all(questions)
    await session.flush()
    for question in questions:
        await session.refresh(question)
    return questions
