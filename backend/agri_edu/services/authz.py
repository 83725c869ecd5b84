from typing import Any

from agri_edu.errors import Forbidden


def owns(entity: Any, user_id: int | None) -> bool:
    owner = getattr(entity, "user_id", None)
    return owner is not None and user_id is not None and owner == user_id


def ensure_owner(entity: Any, user_id: int | None, message: str) -> None:
    if not owns(entity, user_id):
        raise Forbidden(message)
