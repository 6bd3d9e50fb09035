"""
Favorite model - SQLAlchemy ORM
"""
from sqlalchemy import Column, Integer, String, DateTime, UniqueConstraint

from artisans_echo.core.database import Base
from artisans_echo.models.artwork import utcnow


class Favorite(Base):
    """A user's bookmark of an artwork"""

    __tablename__ = "favorites"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_email = Column(String, nullable=False, index=True)
    # Back-reference by id only: favorites outlive deleted artworks
    artwork_id = Column(String(36), nullable=False, index=True)
    added_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    __table_args__ = (
        UniqueConstraint("user_email", "artwork_id", name="unique_favorite"),
    )

    def __repr__(self):
        return f"<Favorite(user_email={self.user_email}, artwork_id={self.artwork_id})>"
