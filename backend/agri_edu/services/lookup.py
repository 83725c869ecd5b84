"""Existence checks and required-field validation run before any write."""
from typing import Any, Iterable, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from agri_edu.errors import BadRequest, NotFound
from agri_edu.models import EducationType, Quiz

T = TypeVar("T")

TYPE_ERROR = 'Type must be either "animal" or "crop"'


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def require_fields(data: Any, fields: Iterable[str]) -> None:
    """Raise BadRequest naming every missing field. ``False`` and ``0`` count as present.

    ``data`` is a dict or a request schema; schemas are checked by their wire (camelCase) names.
    """
    if hasattr(data, "model_dump"):
        data = data.model_dump(by_alias=True)
    missing = [f for f in fields if _is_missing(data.get(f))]
    if missing:
        raise BadRequest(f"Missing required fields: {', '.join(missing)}")


def ensure_education_type(value: str | None) -> str:
    if value not in {t.value for t in EducationType}:
        raise BadRequest(TYPE_ERROR)
    return value


async def get_or_404(session: AsyncSession, model: type[T], pk: int, label: str) -> T:
    obj = await session.get(model, pk)
    if obj is None:
        raise NotFound(f"{label} not found")
    return obj


async def ensure_quiz_of_type(session: AsyncSession, quiz_id: int, quiz_type: str) -> Quiz:
    quiz = await get_or_404(session, Quiz, quiz_id, "Quiz")
    if quiz.type != quiz_type:
        raise BadRequest(f'The provided quizId must be of type "{quiz_type}"')
    return quiz


def merge_patch(entity: Any, changes: dict) -> Any:
    """Apply supplied fields; omitted, null or blank fields keep their stored value."""
    for field, value in changes.items():
        if _is_missing(value):
            continue
        setattr(entity, field, value)
    return entity
