"""
Ownership checks for artwork mutations
"""
from typing import Optional
import logging

from artisans_echo.core.exceptions import Forbidden
from artisans_echo.models.artwork import Artwork

logger = logging.getLogger(__name__)


def _same_identity(a: Optional[str], b: Optional[str]) -> bool:
    if not a or not b:
        return False
    return a.strip().lower() == b.strip().lower()


class AccessGuard:
    """Permits an operation only for the identity that owns the resource"""

    @staticmethod
    def ensure_owner(identity: str, artwork: Artwork) -> None:
        """
        Raise Forbidden unless ``identity`` is the artwork's artist

        Args:
            identity: Verified caller identity (email)
            artwork: Target artwork
        """
        if not _same_identity(identity, artwork.artist_email):
            logger.info(f"Denied {identity} access to artwork {artwork.id}")
            raise Forbidden("You can only modify your own artworks")

    @staticmethod
    def ensure_acting_as(identity: Optional[str], claimed: str) -> None:
        """
        Raise Forbidden when an authenticated caller acts for someone else

        Unauthenticated calls (identity is None) pass through.
        """
        if identity is None:
            return
        if not _same_identity(identity, claimed):
            logger.info(f"Denied {identity} acting as {claimed}")
            raise Forbidden("You can only act on your own behalf")
