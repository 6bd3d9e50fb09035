"""
Likes API endpoints
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional

from artisans_echo.core.database import get_db
from artisans_echo.core.dependencies import get_optional_identity
from artisans_echo.schemas.artwork import LikeAction
from artisans_echo.services.access_guard import AccessGuard
from artisans_echo.services.like_service import LikeService

router = APIRouter()


@router.patch("/artwork/{artwork_id}/like", response_model=dict)
def toggle_like(
    artwork_id: str,
    like_data: LikeAction,
    identity: Optional[str] = Depends(get_optional_identity),
    db: Session = Depends(get_db)
):
    """
    Like or unlike an artwork

    - **artwork_id**: Artwork ID
    - **user_email**: Identity doing the (un)like
    - **action**: "like" or "unlike"

    Repeating the same action does not change the count.
    """
    AccessGuard.ensure_acting_as(identity, like_data.user_email)

    result = LikeService.toggle(db, artwork_id, like_data.user_email, like_data.action)

    if not result.changed:
        message = "Artwork already liked" if like_data.action == "like" else "Artwork not liked yet"
    else:
        message = f"Artwork {like_data.action}d successfully"

    return {
        "ok": True,
        "message": message,
        "data": result.model_dump()
    }
