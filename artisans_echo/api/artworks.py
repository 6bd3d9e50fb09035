"""
Artworks API endpoints
Listings, search, and owner-only editing
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Optional

from artisans_echo.core.database import get_db, get_read_db
from artisans_echo.core.dependencies import get_current_identity, get_optional_identity
from artisans_echo.schemas.artwork import ArtworkCreate, ArtworkUpdate, ArtworkOut, serialize_artworks
from artisans_echo.services.access_guard import AccessGuard
from artisans_echo.services.artwork_service import ArtworkService
from artisans_echo.services.query_builder import ArtworkFilters
from artisans_echo.utils.pagination import get_pagination_params
from artisans_echo.utils.responses import paginated_response, success_response

router = APIRouter()


@router.get("/artworks", response_model=dict)
def list_artworks(
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    search: Optional[str] = None,
    category: Optional[str] = None,
    db: Optional[Session] = Depends(get_read_db)
):
    """
    List public artworks with pagination

    - **page**: Page number (default: 1)
    - **limit**: Items per page (default: 12)
    - **search**: Search in title, artist name and category
    - **category**: Exact category, "all" for every category
    """
    if db is None:
        page, per_page = get_pagination_params(page, limit)
        return paginated_response([], page, per_page, 0)

    filters = ArtworkFilters(search=search, category=category)
    items, total, page, per_page = ArtworkService.list_page(db, filters, page, limit)

    return paginated_response(serialize_artworks(items), page, per_page, total)


@router.get("/all-artworks", response_model=dict)
def list_all_artworks(
    search: Optional[str] = None,
    category: Optional[str] = None,
    db: Optional[Session] = Depends(get_read_db)
):
    """List every public artwork matching the filters, without pagination"""
    if db is None:
        return {"ok": True, "data": []}

    artworks = ArtworkService.find(db, ArtworkFilters(search=search, category=category))
    return {"ok": True, "data": serialize_artworks(artworks)}


@router.get("/latest-artworks", response_model=dict)
@router.get("/featured-artworks", response_model=dict)
def latest_artworks(db: Optional[Session] = Depends(get_read_db)):
    """Most recent public artworks for the home page"""
    if db is None:
        return {"ok": True, "data": []}

    return {"ok": True, "data": serialize_artworks(ArtworkService.latest(db))}


@router.get("/my-artworks/{email}", response_model=dict)
def my_artworks(email: str, db: Optional[Session] = Depends(get_read_db)):
    """Every artwork of one artist, private ones included"""
    if db is None:
        return {"ok": True, "data": []}

    artworks = ArtworkService.find(db, ArtworkFilters(artist_email=email, public_only=False))
    return {"ok": True, "data": serialize_artworks(artworks)}


@router.get("/artworks/search/{term}", response_model=dict)
def search_artworks(term: str, db: Optional[Session] = Depends(get_read_db)):
    """Search public artworks by title, artist name or category"""
    if db is None:
        return {"ok": True, "data": []}

    artworks = ArtworkService.find(db, ArtworkFilters(search=term))
    return {"ok": True, "data": serialize_artworks(artworks)}


@router.get("/artworks/category/{category}", response_model=dict)
def artworks_by_category(category: str, db: Optional[Session] = Depends(get_read_db)):
    """Public artworks in one category"""
    if db is None:
        return {"ok": True, "data": []}

    artworks = ArtworkService.find(db, ArtworkFilters(category=category))
    return {"ok": True, "data": serialize_artworks(artworks)}


@router.get("/artwork/{artwork_id}", response_model=dict)
def get_artwork(artwork_id: str, db: Session = Depends(get_db)):
    """
    Get artwork detail by ID

    - **artwork_id**: Artwork ID
    """
    artwork = ArtworkService.get(db, artwork_id)
    return {"ok": True, "data": ArtworkOut.model_validate(artwork).model_dump()}


@router.post("/artworks", response_model=dict, status_code=status.HTTP_201_CREATED)
def create_artwork(
    artwork_data: ArtworkCreate,
    identity: Optional[str] = Depends(get_optional_identity),
    db: Session = Depends(get_db)
):
    """
    Submit a new artwork

    - **image_url**, **title**, **category**, **artist_email**, **artist_name** are required
    - **visibility**: "Public" (default) or "Private"
    """
    AccessGuard.ensure_acting_as(identity, artwork_data.artist_email)

    artwork = ArtworkService.create(db, artwork_data)
    return success_response(
        ArtworkOut.model_validate(artwork).model_dump(),
        message="Artwork added successfully",
        status_code=status.HTTP_201_CREATED,
        inserted_id=artwork.id,
    )


@router.patch("/artwork/{artwork_id}", response_model=dict)
def update_artwork(
    artwork_id: str,
    artwork_data: ArtworkUpdate,
    identity: str = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """
    Update an artwork (only the artist can edit)

    - **artwork_id**: Artwork ID
    """
    artwork = ArtworkService.update(db, artwork_id, artwork_data, identity=identity)
    return {
        "ok": True,
        "message": "Artwork updated successfully",
        "data": ArtworkOut.model_validate(artwork).model_dump()
    }


@router.delete("/artwork/{artwork_id}", response_model=dict)
def delete_artwork(
    artwork_id: str,
    identity: str = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """
    Delete an artwork (only the artist can delete)

    - **artwork_id**: Artwork ID
    """
    ArtworkService.delete(db, artwork_id, identity=identity)
    return {"ok": True, "message": "Artwork deleted successfully"}
