"""
User model - SQLAlchemy ORM
"""
from sqlalchemy import Column, Integer, String, DateTime

from artisans_echo.core.database import Base
from artisans_echo.models.artwork import utcnow


class User(Base):
    """Profile record created on first login"""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    email = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=True)
    photo_url = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email})>"
