"""
Artwork Service
CRUD and aggregate operations over the artwork collection
"""
from sqlalchemy.orm import Session
from sqlalchemy import func
from typing import Dict, Iterable, List, Optional, Tuple
import logging
import uuid

from artisans_echo.core.config import settings
from artisans_echo.core.exceptions import NotFound
from artisans_echo.models.artwork import Artwork, VISIBILITY_PUBLIC, utcnow
from artisans_echo.schemas.artwork import ArtworkCreate, ArtworkUpdate, CategoryCount, TopArtist
from artisans_echo.services.access_guard import AccessGuard
from artisans_echo.services.query_builder import ArtworkFilters, apply_filters, apply_default_order
from artisans_echo.utils.pagination import get_pagination_params, paginate

logger = logging.getLogger(__name__)


def is_valid_id(value: Optional[str]) -> bool:
    """Check that ``value`` is a structurally valid artwork identifier"""
    if not value or not isinstance(value, str):
        return False
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True


class ArtworkService:
    """Service for artwork operations"""

    @staticmethod
    def create(db: Session, data: ArtworkCreate) -> Artwork:
        """
        Store a new artwork

        Args:
            db: Database session
            data: Validated submission

        Returns:
            Created Artwork with likes = 0 and an empty liked-by set
        """
        artwork = Artwork(
            **data.model_dump(),
            likes=0,
            created_at=utcnow(),
        )
        db.add(artwork)
        db.commit()
        db.refresh(artwork)

        logger.info(f"Artwork {artwork.id} created by {artwork.artist_email}")
        return artwork

    @staticmethod
    def get(db: Session, artwork_id: str) -> Artwork:
        """
        Fetch one artwork

        Raises:
            NotFound: If the id is malformed or does not resolve
        """
        if not is_valid_id(artwork_id):
            raise NotFound("Artwork not found")

        artwork = db.query(Artwork).filter(Artwork.id == artwork_id).first()
        if not artwork:
            raise NotFound("Artwork not found")
        return artwork

    @staticmethod
    def get_many(db: Session, artwork_ids: Iterable[str]) -> Dict[str, Artwork]:
        """Resolve ids in one lookup; malformed and missing ids are skipped"""
        ids = [artwork_id for artwork_id in artwork_ids if is_valid_id(artwork_id)]
        if not ids:
            return {}
        artworks = db.query(Artwork).filter(Artwork.id.in_(ids)).all()
        return {artwork.id: artwork for artwork in artworks}

    @staticmethod
    def find(db: Session, filters: ArtworkFilters, limit: Optional[int] = None) -> List[Artwork]:
        query = apply_default_order(apply_filters(db.query(Artwork), filters))
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    @staticmethod
    def list_page(
        db: Session,
        filters: ArtworkFilters,
        page: Optional[int] = 1,
        per_page: Optional[int] = None
    ) -> Tuple[List[Artwork], int, int, int]:
        """
        One page of a filtered listing

        Returns:
            Tuple of (items, total, page, per_page)
        """
        page, per_page = get_pagination_params(page, per_page)
        query = apply_default_order(apply_filters(db.query(Artwork), filters))
        items, total = paginate(query, page, per_page)
        return items, total, page, per_page

    @staticmethod
    def latest(db: Session, limit: Optional[int] = None) -> List[Artwork]:
        if limit is None:
            limit = settings.FEATURED_LIMIT
        return ArtworkService.find(db, ArtworkFilters(), limit=limit)

    @staticmethod
    def update(
        db: Session,
        artwork_id: str,
        data: ArtworkUpdate,
        identity: Optional[str] = None
    ) -> Artwork:
        """
        Merge the supplied fields into an artwork

        Args:
            db: Database session
            artwork_id: Artwork ID
            data: Fields to change
            identity: Verified caller identity; when given, must own the artwork

        Returns:
            Updated Artwork
        """
        artwork = ArtworkService.get(db, artwork_id)
        if identity is not None:
            AccessGuard.ensure_owner(identity, artwork)

        changes = {key: value for key, value in data.model_dump(exclude_unset=True).items() if value is not None}
        for key, value in changes.items():
            setattr(artwork, key, value)
        artwork.updated_at = utcnow()

        db.commit()
        db.refresh(artwork)

        logger.info(f"Artwork {artwork.id} updated: {sorted(changes)}")
        return artwork

    @staticmethod
    def delete(db: Session, artwork_id: str, identity: Optional[str] = None) -> None:
        """
        Remove an artwork and its liked-by set

        Favorites pointing at it are left in place.
        """
        artwork = ArtworkService.get(db, artwork_id)
        if identity is not None:
            AccessGuard.ensure_owner(identity, artwork)

        db.delete(artwork)
        db.commit()

        logger.info(f"Artwork {artwork_id} deleted")

    @staticmethod
    def count_public(db: Session) -> int:
        return db.query(func.count(Artwork.id)).filter(
            Artwork.visibility == VISIBILITY_PUBLIC
        ).scalar() or 0

    @staticmethod
    def category_counts(db: Session) -> List[CategoryCount]:
        """Public artworks per category, largest first"""
        count = func.count(Artwork.id)
        rows = db.query(Artwork.category, count.label("total")).filter(
            Artwork.visibility == VISIBILITY_PUBLIC
        ).group_by(Artwork.category).order_by(count.desc(), Artwork.category).all()

        return [CategoryCount(category=row.category, count=row.total) for row in rows]

    @staticmethod
    def categories(db: Session) -> List[str]:
        rows = db.query(Artwork.category).filter(
            Artwork.visibility == VISIBILITY_PUBLIC
        ).distinct().order_by(Artwork.category).all()
        return [row.category for row in rows]

    @staticmethod
    def top_artists(db: Session, limit: Optional[int] = None) -> List[TopArtist]:
        """
        Artists ranked by total likes, then by number of artworks

        Display name and photo come from the artist's most recent artwork.
        """
        if limit is None:
            limit = settings.TOP_ARTISTS_LIMIT

        total_likes = func.coalesce(func.sum(Artwork.likes), 0)
        total_artworks = func.count(Artwork.id)
        rows = db.query(
            Artwork.artist_email,
            total_likes.label("total_likes"),
            total_artworks.label("total_artworks"),
        ).group_by(Artwork.artist_email).order_by(
            total_likes.desc(),
            total_artworks.desc(),
            Artwork.artist_email,
        ).limit(limit).all()

        artists = []
        for row in rows:
            latest = db.query(Artwork.artist_name, Artwork.artist_photo).filter(
                Artwork.artist_email == row.artist_email
            ).order_by(Artwork.created_at.desc()).first()

            artists.append(TopArtist(
                artist_email=row.artist_email,
                artist_name=latest.artist_name if latest else None,
                artist_photo=latest.artist_photo if latest else None,
                total_likes=int(row.total_likes or 0),
                total_artworks=int(row.total_artworks or 0),
            ))
        return artists
