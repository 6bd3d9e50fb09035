"""
Models package - Import all models here for easy access
"""
from artisans_echo.models.artwork import Artwork, ArtworkLike
from artisans_echo.models.user import User
from artisans_echo.models.favorite import Favorite

__all__ = [
    "Artwork",
    "ArtworkLike",
    "User",
    "Favorite",
]
