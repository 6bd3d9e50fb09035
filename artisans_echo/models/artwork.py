"""
Artwork model - SQLAlchemy ORM
"""
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
import uuid

from artisans_echo.core.database import Base


VISIBILITY_PUBLIC = "Public"
VISIBILITY_PRIVATE = "Private"


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Artwork(Base):
    """Posted artwork with ownership, visibility and engagement metadata"""

    __tablename__ = "artworks"

    # Primary Key
    id = Column(String(36), primary_key=True, default=new_id)

    # Content
    title = Column(String, nullable=False, index=True)
    image_url = Column(String, nullable=False)
    category = Column(String, nullable=False, index=True)
    medium = Column(String, nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    dimensions = Column(String, nullable=False, default="")
    price = Column(String, nullable=False, default="")
    visibility = Column(String, nullable=False, default=VISIBILITY_PUBLIC, index=True)

    # Owner
    artist_email = Column(String, nullable=False, index=True)
    artist_name = Column(String, nullable=False)
    artist_photo = Column(String, nullable=True)

    # Statistics
    likes = Column(Integer, default=0, nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        CheckConstraint("likes >= 0", name="artwork_likes_non_negative"),
    )

    # Liked-by set, removed together with the artwork
    like_entries = relationship(
        "ArtworkLike",
        back_populates="artwork",
        cascade="all, delete-orphan",
        order_by="ArtworkLike.created_at",
        lazy="selectin",
    )

    def __repr__(self):
        return f"<Artwork(id={self.id}, title={self.title}, artist_email={self.artist_email})>"

    @property
    def liked_by(self):
        return [entry.user_email for entry in self.like_entries]

    @property
    def is_public(self) -> bool:
        return self.visibility == VISIBILITY_PUBLIC


class ArtworkLike(Base):
    """One member of an artwork's liked-by set"""

    __tablename__ = "artwork_likes"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    artwork_id = Column(String(36), ForeignKey("artworks.id", ondelete="CASCADE"), nullable=False, index=True)
    user_email = Column(String, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Unique constraint - user can only like an artwork once
    __table_args__ = (
        UniqueConstraint("artwork_id", "user_email", name="unique_artwork_like"),
    )

    artwork = relationship("Artwork", back_populates="like_entries")
