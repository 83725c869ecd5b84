from datetime import datetime

from agri_edu.schemas.common import CamelModel


class ChatMessageCreate(CamelModel):
    text: str | None = None
    is_bot: bool | None = None
    user_id: int | None = None


class ChatMessageResponse(CamelModel):
    id: int
    text: str
    is_bot: bool
    user_id: int
    timestamp: datetime
