"""
Favorite Pydantic schemas
"""
from pydantic import BaseModel, EmailStr, Field, field_validator
from datetime import datetime

from artisans_echo.schemas.common import ORMConfig


class FavoriteRequest(BaseModel):
    """Body of add/remove favorite calls"""
    user_email: EmailStr
    artwork_id: str = Field(..., min_length=1)

    @field_validator("user_email")
    @classmethod
    def normalize_email(cls, v):
        return v.lower()

    @field_validator("artwork_id", mode="before")
    @classmethod
    def strip_id(cls, v):
        if isinstance(v, str):
            v = v.strip()
        return v


class FavoriteOut(BaseModel):
    id: int
    user_email: str
    artwork_id: str
    added_at: datetime

    model_config = ORMConfig
