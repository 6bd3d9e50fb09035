"""
Core configuration settings for Artisan's Echo API
"""
from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # App Config
    APP_NAME: str = "Artisan's Echo"
    APP_ENV: str = "development"
    DEBUG: bool = False
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./artisans_echo.db"
    DATABASE_ECHO: bool = False
    DATABASE_RETRY_INTERVAL: float = 5.0  # seconds between reconnect attempts while degraded

    # Firebase (identity provider)
    FIREBASE_CREDENTIALS: Optional[str] = None
    FIREBASE_PROJECT_ID: Optional[str] = None

    # CORS
    CORS_ORIGINS: str = "*"

    @property
    def cors_origins_list(self) -> List[str]:
        """Convert CORS_ORIGINS string to list"""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    # Pagination
    DEFAULT_PAGE_SIZE: int = 12
    MAX_PAGE_SIZE: int = 100

    # Listings
    FEATURED_LIMIT: int = 6
    TOP_ARTISTS_LIMIT: int = 4
    SEARCH_TERM_MAX_LENGTH: int = 100

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


# Create global settings instance
settings = Settings()
