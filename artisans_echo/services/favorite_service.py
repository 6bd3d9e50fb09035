"""
Favorite Service
Users' saved artworks
"""
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from typing import List, Tuple
import logging

from artisans_echo.core.exceptions import NotFound, ValidationError
from artisans_echo.models.artwork import Artwork, utcnow
from artisans_echo.models.favorite import Favorite
from artisans_echo.services.artwork_service import ArtworkService, is_valid_id

logger = logging.getLogger(__name__)


def _require(user_email: str, artwork_id: str) -> Tuple[str, str]:
    if not user_email or not artwork_id:
        raise ValidationError("User email and artwork ID are required")
    return user_email.strip().lower(), artwork_id.strip()


class FavoriteService:
    """Service for the user/artwork favorites relation"""

    @staticmethod
    def find(db: Session, user_email: str, artwork_id: str):
        return db.query(Favorite).filter(
            Favorite.user_email == user_email,
            Favorite.artwork_id == artwork_id
        ).first()

    @staticmethod
    def add(db: Session, user_email: str, artwork_id: str) -> Tuple[Favorite, bool]:
        """
        Save an artwork to a user's favorites

        Args:
            db: Database session
            user_email: Identity saving the artwork
            artwork_id: Artwork ID

        Returns:
            Tuple of (favorite, created). ``created`` is False when the pair
            was already saved.

        Raises:
            NotFound: If the artwork id is malformed or does not resolve
        """
        user_email, artwork_id = _require(user_email, artwork_id)
        ArtworkService.get(db, artwork_id)

        existing = FavoriteService.find(db, user_email, artwork_id)
        if existing:
            return existing, False

        favorite = Favorite(user_email=user_email, artwork_id=artwork_id, added_at=utcnow())
        db.add(favorite)
        try:
            db.commit()
        except IntegrityError:
            # Lost a race against the same add; the unique constraint kept one row
            db.rollback()
            logger.info(f"Concurrent duplicate favorite {user_email} -> {artwork_id}")
            existing = FavoriteService.find(db, user_email, artwork_id)
            if existing is None:
                raise
            return existing, False

        db.refresh(favorite)
        logger.info(f"Favorite added: {user_email} -> {artwork_id}")
        return favorite, True

    @staticmethod
    def remove(db: Session, user_email: str, artwork_id: str) -> None:
        """
        Delete a favorite

        Raises:
            NotFound: If the pair was not saved
        """
        user_email, artwork_id = _require(user_email, artwork_id)

        deleted = db.query(Favorite).filter(
            Favorite.user_email == user_email,
            Favorite.artwork_id == artwork_id
        ).delete(synchronize_session=False)
        db.commit()

        if not deleted:
            raise NotFound("Favorite not found")
        logger.info(f"Favorite removed: {user_email} -> {artwork_id}")

    @staticmethod
    def is_favorite(db: Session, user_email: str, artwork_id: str) -> bool:
        user_email, artwork_id = _require(user_email, artwork_id)
        if not is_valid_id(artwork_id):
            raise NotFound("Artwork not found")
        return FavoriteService.find(db, user_email, artwork_id) is not None

    @staticmethod
    def list_artworks(db: Session, user_email: str) -> List[Artwork]:
        """
        Resolve a user's favorites into artworks, most recently saved first

        Favorites pointing at malformed or deleted artwork ids are skipped;
        they stay in the ledger.
        """
        if not user_email or not user_email.strip():
            raise ValidationError("Email is required")

        favorites = db.query(Favorite).filter(
            Favorite.user_email == user_email.strip().lower()
        ).order_by(Favorite.added_at.desc(), Favorite.id.desc()).all()

        artworks = ArtworkService.get_many(db, [fav.artwork_id for fav in favorites])
        return [artworks[fav.artwork_id] for fav in favorites if fav.artwork_id in artworks]
