import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.pool import StaticPool

from agri_edu.config import Settings
from agri_edu.db.session import Database
from agri_edu.main import create_app
from agri_edu.models import User


@pytest_asyncio.fixture
async def database():
    db = Database(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await db.connect()
    await db.create_all()
    yield db
    await db.disconnect()


@pytest_asyncio.fixture
async def client(database):
    settings = Settings(database_url=database.url, create_tables=False, chat_history_window=20)
    app = create_app(settings, database=database)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def make_user(database):
    async def _make(username: str, picture: str | None = None):
        async with database.session_maker() as session:
            # user rows normally come from the auth system
            user = User(username=username, email=f"{username}@farm.test", profile_picture=picture)
            session.add(user)
            await session.commit()
            await session.refresh(user)
            return user

    return _make


@pytest_asyncio.fixture
async def video(client):
    res = await client.post("/videos", json={"title": "Raising goats", "category": "livestock", "type": "animal"})
    assert res.status_code == 201
    return res.json()


@pytest_asyncio.fixture
async def qna(client, video):
    res = await client.post(
        "/qna",
        json={
            "text": "How often should goats be fed?",
            "authorName": "Amira",
            "authorImage": "amira.png",
            "videoId": video["id"],
            "userId": 1,
        },
    )
    assert res.status_code == 201
    return res.json()


@pytest_asyncio.fixture
async def reply(client, qna):
    res = await client.post(
        "/replies",
        json={
            "text": "Twice a day.",
            "authorName": "Karim",
            "authorImage": "karim.png",
            "questionAndAnswerId": qna["id"],
            "userId": 2,
        },
    )
    assert res.status_code == 201
    return res.json()


@pytest_asyncio.fixture
async def quiz(client):
    res = await client.post(
        "/quizzes", json={"title": "Goat basics", "description": "Feeding and care", "type": "animal"}
    )
    assert res.status_code == 201
    return res.json()
