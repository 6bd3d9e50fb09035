"""
Artwork Pydantic schemas for request/response validation
"""
from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional, List, Literal
from datetime import datetime
import re

from artisans_echo.schemas.common import ORMConfig


# http(s) URL with a host and no whitespace
IMAGE_URL_PATTERN = re.compile(r"^https?://[^\s/$.?#][^\s]*$", re.IGNORECASE)

Visibility = Literal["Public", "Private"]


def _validate_image_url(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    value = value.strip()
    if not IMAGE_URL_PATTERN.match(value):
        raise ValueError("image_url must be an http(s) URL")
    return value


# ============ Request Schemas ============

class ArtworkCreate(BaseModel):
    """Schema for submitting a new artwork"""
    image_url: str = Field(..., min_length=1, description="Public URL of the artwork image")
    title: str = Field(..., min_length=1, max_length=200)
    category: str = Field(..., min_length=1, max_length=100)
    artist_email: EmailStr
    artist_name: str = Field(..., min_length=1, max_length=100)
    artist_photo: Optional[str] = None
    medium: str = ""
    description: str = ""
    dimensions: str = ""
    price: str = ""
    visibility: Visibility = "Public"

    @field_validator("title", "category", "artist_name", mode="before")
    @classmethod
    def strip_required(cls, v):
        if isinstance(v, str):
            v = v.strip()
        return v

    @field_validator("image_url")
    @classmethod
    def validate_image_url(cls, v):
        return _validate_image_url(v)

    @field_validator("artist_email")
    @classmethod
    def normalize_email(cls, v):
        return v.lower()


class ArtworkUpdate(BaseModel):
    """Schema for editing an artwork; only the fields sent are changed"""
    image_url: Optional[str] = None
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    medium: Optional[str] = None
    description: Optional[str] = None
    dimensions: Optional[str] = None
    price: Optional[str] = None
    visibility: Optional[Visibility] = None
    artist_name: Optional[str] = Field(None, min_length=1, max_length=100)
    artist_photo: Optional[str] = None

    @field_validator("title", "category", "artist_name", mode="before")
    @classmethod
    def strip_required(cls, v):
        if isinstance(v, str):
            v = v.strip()
        return v

    @field_validator("image_url")
    @classmethod
    def validate_image_url(cls, v):
        return _validate_image_url(v)


class LikeAction(BaseModel):
    """Schema for toggling a like"""
    user_email: EmailStr
    action: Literal["like", "unlike"]

    @field_validator("user_email")
    @classmethod
    def normalize_email(cls, v):
        return v.lower()


# ============ Response Schemas ============

class ArtworkOut(BaseModel):
    """Full artwork record"""
    id: str
    title: str
    image_url: str
    category: str
    medium: str
    description: str
    dimensions: str
    price: str
    visibility: str
    artist_email: str
    artist_name: str
    artist_photo: Optional[str] = None
    likes: int
    liked_by: List[str] = []
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ORMConfig


class CategoryCount(BaseModel):
    category: str
    count: int


class TopArtist(BaseModel):
    artist_email: str
    artist_name: Optional[str]
    artist_photo: Optional[str] = None
    total_likes: int
    total_artworks: int


class LikeStatus(BaseModel):
    """Like counter state after a toggle"""
    artwork_id: str
    likes: int
    liked_by: List[str]
    is_liked: bool
    changed: bool


def serialize_artworks(artworks) -> List[dict]:
    return [ArtworkOut.model_validate(artwork).model_dump() for artwork in artworks]
