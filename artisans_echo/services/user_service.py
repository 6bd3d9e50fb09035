"""
User Service
Profile records created on first login
"""
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from typing import Tuple
import logging

from artisans_echo.models.artwork import utcnow
from artisans_echo.models.user import User
from artisans_echo.schemas.user import UserCreate

logger = logging.getLogger(__name__)


class UserService:

    @staticmethod
    def get_or_create(db: Session, data: UserCreate) -> Tuple[User, bool]:
        """
        Return the user for ``data.email``, creating it if absent

        Returns:
            Tuple of (user, created)
        """
        user = db.query(User).filter(User.email == data.email).first()
        if user:
            return user, False

        user = User(
            email=data.email,
            name=data.name,
            photo_url=data.photo_url,
            created_at=utcnow(),
        )
        db.add(user)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            user = db.query(User).filter(User.email == data.email).first()
            if user is None:
                raise
            return user, False

        db.refresh(user)
        logger.info(f"User created: {user.email}")
        return user, True
