from datetime import datetime

from agri_edu.schemas.common import CamelModel


class LikeRequest(CamelModel):
    user_id: int | None = None
    content_type: str | None = None
    content_id: int | None = None


class LikeUser(CamelModel):
    id: int
    username: str
    profile_picture: str | None = None


class LikeResponse(CamelModel):
    id: int
    user_id: int
    content_type: str
    content_id: int
    created_at: datetime | None = None


class LikeWithUserResponse(LikeResponse):
    user: LikeUser | None = None


class LikeAddedResponse(CamelModel):
    like: LikeResponse
    total_likes: int


class LikeRemovedResponse(CamelModel):
    message: str
    total_likes: int


class LikesCountResponse(CamelModel):
    total_likes: int


class UserLikeResponse(CamelModel):
    has_liked: bool


class LikeStateResponse(CamelModel):
    content_type: str
    content_id: int
    user_id: int
    liked: bool
    total_likes: int
