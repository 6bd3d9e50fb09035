"""
Favorites API endpoints
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import Optional

from artisans_echo.core.database import get_db, get_read_db
from artisans_echo.core.dependencies import get_optional_identity
from artisans_echo.schemas.artwork import serialize_artworks
from artisans_echo.schemas.favorite import FavoriteRequest, FavoriteOut
from artisans_echo.services.access_guard import AccessGuard
from artisans_echo.services.favorite_service import FavoriteService
from artisans_echo.utils.responses import success_response

router = APIRouter()


@router.get("/favorites/{email}", response_model=dict)
def list_favorites(email: str, db: Optional[Session] = Depends(get_read_db)):
    """
    Get a user's favorite artworks

    Favorites whose artwork was deleted are left out.
    """
    if db is None:
        return {"ok": True, "data": []}

    artworks = FavoriteService.list_artworks(db, email)
    return {"ok": True, "data": serialize_artworks(artworks)}


@router.get("/favorites/{email}/{artwork_id}", response_model=dict)
def check_favorite(email: str, artwork_id: str, db: Session = Depends(get_db)):
    """Check if an artwork is in a user's favorites"""
    return {
        "ok": True,
        "is_favorite": FavoriteService.is_favorite(db, email, artwork_id)
    }


@router.post("/favorites", response_model=dict, status_code=status.HTTP_201_CREATED)
def add_favorite(
    favorite_data: FavoriteRequest,
    identity: Optional[str] = Depends(get_optional_identity),
    db: Session = Depends(get_db)
):
    """
    Add an artwork to a user's favorites

    Saving the same artwork twice answers 200 with ``already_exists``.
    """
    AccessGuard.ensure_acting_as(identity, favorite_data.user_email)

    favorite, created = FavoriteService.add(db, favorite_data.user_email, favorite_data.artwork_id)
    data = FavoriteOut.model_validate(favorite).model_dump()

    if not created:
        return success_response(data, message="Already in favorites", already_exists=True)

    return success_response(
        data,
        message="Added to favorites successfully",
        status_code=status.HTTP_201_CREATED,
        already_exists=False,
    )


@router.delete("/favorites", response_model=dict)
def remove_favorite(
    favorite_data: FavoriteRequest,
    identity: Optional[str] = Depends(get_optional_identity),
    db: Session = Depends(get_db)
):
    """Remove an artwork from a user's favorites"""
    AccessGuard.ensure_acting_as(identity, favorite_data.user_email)

    FavoriteService.remove(db, favorite_data.user_email, favorite_data.artwork_id)
    return {"ok": True, "message": "Removed from favorites successfully"}
