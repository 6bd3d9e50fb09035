"""
Stats API endpoints
Aggregates over public artworks
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional

from artisans_echo.core.database import get_read_db
from artisans_echo.services.artwork_service import ArtworkService

router = APIRouter()


@router.get("/stats/total-artworks", response_model=dict)
def total_artworks(db: Optional[Session] = Depends(get_read_db)):
    """Number of public artworks"""
    total = ArtworkService.count_public(db) if db is not None else 0
    return {"ok": True, "data": {"total": total}}


@router.get("/stats/by-category", response_model=dict)
def artworks_by_category(db: Optional[Session] = Depends(get_read_db)):
    """Public artwork count per category, largest first"""
    data = [row.model_dump() for row in ArtworkService.category_counts(db)] if db is not None else []
    return {"ok": True, "data": data}


@router.get("/top-artists", response_model=dict)
def top_artists(db: Optional[Session] = Depends(get_read_db)):
    """Artists with the most likes"""
    data = [row.model_dump() for row in ArtworkService.top_artists(db)] if db is not None else []
    return {"ok": True, "data": data}


@router.get("/categories", response_model=dict)
def categories(db: Optional[Session] = Depends(get_read_db)):
    """Distinct categories of public artworks"""
    data = ArtworkService.categories(db) if db is not None else []
    return {"ok": True, "data": data}
