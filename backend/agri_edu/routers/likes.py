from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from agri_edu.db.session import get_db
from agri_edu.dependencies import get_like_service
from agri_edu.schemas.like import (
    LikeRequest,
    LikeAddedResponse,
    LikeRemovedResponse,
    LikesCountResponse,
    UserLikeResponse,
    LikeWithUserResponse,
    LikeStateResponse,
)
from agri_edu.services.like_service import LikeService, parse_content_kind
from agri_edu.services.lookup import require_fields

router = APIRouter()

LIKE_FIELDS = ["userId", "contentType", "contentId"]


@router.post("/add", response_model=LikeAddedResponse, status_code=status.HTTP_201_CREATED)
async def add_like(
    body: LikeRequest,
    db: AsyncSession = Depends(get_db),
    likes: LikeService = Depends(get_like_service),
):
    require_fields(body, LIKE_FIELDS)
    kind = parse_content_kind(body.content_type)
    like, total = await likes.add_like(body.user_id, kind, body.content_id)
    await db.commit()
    return {"like": like, "total_likes": total}


@router.post("/remove", response_model=LikeRemovedResponse)
async def remove_like(
    body: LikeRequest,
    db: AsyncSession = Depends(get_db),
    likes: LikeService = Depends(get_like_service),
):
    require_fields(body, LIKE_FIELDS)
    kind = parse_content_kind(body.content_type)
    total = await likes.remove_like(body.user_id, kind, body.content_id)
    await db.commit()
    return {"message": "Like removed successfully", "total_likes": total}


@router.post("/toggle-like", response_model=LikeStateResponse)
async def toggle_like(
    body: LikeRequest,
    db: AsyncSession = Depends(get_db),
    likes: LikeService = Depends(get_like_service),
):
    require_fields(body, LIKE_FIELDS)
    kind = parse_content_kind(body.content_type)
    state = await likes.toggle_like(body.user_id, kind, body.content_id)
    await db.commit()
    return state


@router.get("/count/{content_type}/{content_id}", response_model=LikesCountResponse)
async def get_likes_count(
    content_type: str, content_id: int, likes: LikeService = Depends(get_like_service)
):
    kind = parse_content_kind(content_type)
    return {"total_likes": await likes.get_likes_count(kind, content_id)}


@router.get("/check/{user_id}/{content_type}/{content_id}", response_model=UserLikeResponse)
async def check_user_like(
    user_id: int, content_type: str, content_id: int, likes: LikeService = Depends(get_like_service)
):
    kind = parse_content_kind(content_type)
    return {"has_liked": await likes.check_user_like(user_id, kind, content_id)}


@router.get("/{content_type}/{content_id}", response_model=list[LikeWithUserResponse])
async def get_content_likes(
    content_type: str, content_id: int, likes: LikeService = Depends(get_like_service)
):
    kind = parse_content_kind(content_type)
    return await likes.get_content_likes(kind, content_id)
