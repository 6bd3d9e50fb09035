"""
Like Service
Per-user likes on artworks
"""
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from sqlalchemy import update, delete
import logging

from artisans_echo.core.exceptions import ValidationError
from artisans_echo.models.artwork import Artwork, ArtworkLike, utcnow
from artisans_echo.schemas.artwork import LikeStatus
from artisans_echo.services.artwork_service import ArtworkService

logger = logging.getLogger(__name__)

LIKE = "like"
UNLIKE = "unlike"


class LikeService:
    """Keeps an artwork's like count equal to the size of its liked-by set"""

    @staticmethod
    def is_liked(db: Session, artwork_id: str, user_email: str) -> bool:
        return db.query(ArtworkLike.id).filter(
            ArtworkLike.artwork_id == artwork_id,
            ArtworkLike.user_email == user_email
        ).first() is not None

    @staticmethod
    def toggle(db: Session, artwork_id: str, user_email: str, action: str) -> LikeStatus:
        """
        Like or unlike an artwork

        The count only moves when the user enters or leaves the liked-by set,
        and both changes are committed in one transaction. Repeating a like or
        an unlike is a no-op.

        Args:
            db: Database session
            artwork_id: Artwork ID
            user_email: Identity doing the (un)like
            action: "like" or "unlike"

        Returns:
            LikeStatus after the call
        """
        if action not in (LIKE, UNLIKE):
            raise ValidationError('Invalid action. Use "like" or "unlike"')
        if not user_email or not user_email.strip():
            raise ValidationError("User email is required")

        user_email = user_email.strip().lower()
        artwork = ArtworkService.get(db, artwork_id)
        liked = LikeService.is_liked(db, artwork.id, user_email)
        changed = False

        if action == LIKE and not liked:
            db.add(ArtworkLike(artwork_id=artwork.id, user_email=user_email, created_at=utcnow()))
            db.execute(
                update(Artwork)
                .where(Artwork.id == artwork.id)
                .values(likes=Artwork.likes + 1)
            )
            changed = True
        elif action == UNLIKE and liked:
            removed = db.execute(
                delete(ArtworkLike).where(
                    ArtworkLike.artwork_id == artwork.id,
                    ArtworkLike.user_email == user_email
                )
            ).rowcount
            if removed:
                db.execute(
                    update(Artwork)
                    .where(Artwork.id == artwork.id, Artwork.likes > 0)
                    .values(likes=Artwork.likes - 1)
                )
                changed = True

        try:
            db.commit()
        except IntegrityError:
            # A concurrent like from the same user won the unique constraint;
            # the increment is rolled back with the duplicate row.
            db.rollback()
            changed = False
            logger.info(f"Duplicate like from {user_email} on artwork {artwork_id} ignored")

        db.refresh(artwork)
        liked_by = artwork.liked_by

        return LikeStatus(
            artwork_id=artwork.id,
            likes=artwork.likes,
            liked_by=liked_by,
            is_liked=user_email in liked_by,
            changed=changed,
        )
