"""
Users API endpoints
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import Optional

from artisans_echo.core.database import get_db
from artisans_echo.core.dependencies import get_optional_identity
from artisans_echo.schemas.user import UserCreate, UserPublic
from artisans_echo.services.access_guard import AccessGuard
from artisans_echo.services.user_service import UserService
from artisans_echo.utils.responses import success_response

router = APIRouter()


@router.post("/users", response_model=dict)
def create_or_get_user(
    user_data: UserCreate,
    identity: Optional[str] = Depends(get_optional_identity),
    db: Session = Depends(get_db)
):
    """
    Create the user profile on first login, or return the existing one

    - **email**: User email (unique)
    - **name**: Display name
    - **photo_url**: Optional profile photo
    """
    AccessGuard.ensure_acting_as(identity, user_data.email)

    user, created = UserService.get_or_create(db, user_data)
    data = UserPublic.model_validate(user).model_dump()

    if not created:
        return success_response(data, message="User already exists")

    return success_response(data, message="User created successfully", status_code=status.HTTP_201_CREATED)
