"""Likes on questions and replies, stored as one junction row per (user, content)."""
import logging
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from agri_edu.db.repositories import like_repo
from agri_edu.errors import BadRequest, Conflict, NotFound
from agri_edu.models import ContentKind, Like, QuestionAndAnswer, Reply, User
from agri_edu.services.lookup import get_or_404

logger = logging.getLogger(__name__)

# ContentKind -> (table, label used in "<label> not found")
CONTENT_TARGETS: dict[ContentKind, tuple[type, str]] = {
    ContentKind.question: (QuestionAndAnswer, "Question"),
    ContentKind.reply: (Reply, "Reply"),
}


def parse_content_kind(value: str | None) -> ContentKind:
    try:
        return ContentKind(value)
    except ValueError:
        raise BadRequest('contentType must be either "question" or "reply"')


@dataclass
class LikeState:
    content_type: str
    content_id: int
    user_id: int
    liked: bool
    total_likes: int


class LikeService:
    """Likes keyed by (user, content). User rows are provisioned by the external auth system,
    so liking as an unknown user is a 404 rather than a foreign key failure.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _ensure_target(self, kind: ContentKind, content_id: int):
        model, label = CONTENT_TARGETS[kind]
        return await get_or_404(self.db, model, content_id, label)

    async def _insert(self, user_id: int, kind: ContentKind, content_id: int) -> Like:
        # the unique constraint is the final arbiter when two requests race past the pre-check
        try:
            return await like_repo.create_like(self.db, user_id, kind.value, content_id)
        except IntegrityError:
            await self.db.rollback()
            if await like_repo.find_like(self.db, user_id, kind.value, content_id):
                logger.warning(f"Concurrent duplicate like rejected: user={user_id} {kind.value}={content_id}")
                raise Conflict("User already liked this content")
            raise

    async def add_like(self, user_id: int, kind: ContentKind, content_id: int) -> tuple[Like, int]:
        await self._ensure_target(kind, content_id)
        await get_or_404(self.db, User, user_id, "User")
        if await like_repo.find_like(self.db, user_id, kind.value, content_id):
            raise Conflict("User already liked this content")
        like = await self._insert(user_id, kind, content_id)
        total = await like_repo.count_likes(self.db, kind.value, content_id)
        logger.info(f"Like added: user={user_id} {kind.value}={content_id} total={total}")
        return like, total

    async def remove_like(self, user_id: int, kind: ContentKind, content_id: int) -> int:
        like = await like_repo.find_like(self.db, user_id, kind.value, content_id)
        if like is None:
            raise NotFound("Like not found")
        await self.db.delete(like)
        await self.db.flush()
        total = await like_repo.count_likes(self.db, kind.value, content_id)
        logger.info(f"Like removed: user={user_id} {kind.value}={content_id} total={total}")
        return total

    async def toggle_like(self, user_id: int, kind: ContentKind, content_id: int) -> LikeState:
        """Like if not yet liked, otherwise unlike. Same junction row as add/remove."""
        await self._ensure_target(kind, content_id)
        existing = await like_repo.find_like(self.db, user_id, kind.value, content_id)
        if existing is None:
            await get_or_404(self.db, User, user_id, "User")
            await self._insert(user_id, kind, content_id)
            liked = True
        else:
            await self.db.delete(existing)
            await self.db.flush()
            liked = False
        total = await like_repo.count_likes(self.db, kind.value, content_id)
        return LikeState(
            content_type=kind.value,
            content_id=content_id,
            user_id=user_id,
            liked=liked,
            total_likes=total,
        )

    async def get_likes_count(self, kind: ContentKind, content_id: int) -> int:
        return await like_repo.count_likes(self.db, kind.value, content_id)

    async def check_user_like(self, user_id: int, kind: ContentKind, content_id: int) -> bool:
        return await like_repo.find_like(self.db, user_id, kind.value, content_id) is not None

    async def get_content_likes(self, kind: ContentKind, content_id: int) -> list[Like]:
        return await like_repo.get_likes_with_users(self.db, kind.value, content_id)

    async def forget_content(self, kind: ContentKind, content_id: int) -> None:
        """Drop likes of deleted content; the polymorphic reference has no FK to cascade."""
        await like_repo.delete_likes_for_content(self.db, kind.value, content_id)
