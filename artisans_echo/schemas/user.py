"""
User Pydantic schemas
"""
from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime

from artisans_echo.schemas.common import ORMConfig


class UserCreate(BaseModel):
    """Schema for the create-or-fetch call made on login"""
    email: EmailStr
    name: Optional[str] = Field(None, max_length=100)
    photo_url: Optional[str] = None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        return v.lower()


class UserPublic(BaseModel):
    id: int
    email: str
    name: Optional[str] = None
    photo_url: Optional[str] = None
    created_at: datetime

    model_config = ORMConfig
