"""
Identity token verification against Firebase Authentication
"""
import firebase_admin
from firebase_admin import auth, credentials
from typing import Optional, Dict, Any
import logging

from artisans_echo.core.config import settings

logger = logging.getLogger(__name__)


def get_firebase_app() -> firebase_admin.App:
    """Initialize the Firebase Admin app on first use"""
    if not firebase_admin._apps:
        if settings.FIREBASE_CREDENTIALS:
            cred = credentials.Certificate(settings.FIREBASE_CREDENTIALS)
            firebase_admin.initialize_app(cred)
        else:
            # Application Default Credentials (ADC)
            options = {"projectId": settings.FIREBASE_PROJECT_ID} if settings.FIREBASE_PROJECT_ID else None
            firebase_admin.initialize_app(credentials.ApplicationDefault(), options)
        logger.info("Firebase Admin initialized successfully")
    return firebase_admin.get_app()


def verify_id_token(token: str) -> Optional[Dict[str, Any]]:
    """
    Verify a Firebase ID token

    Args:
        token: Raw bearer token

    Returns:
        Decoded claims, or None if the token is invalid, expired or revoked
    """
    try:
        return auth.verify_id_token(token, app=get_firebase_app())
    except (auth.InvalidIdTokenError, auth.ExpiredIdTokenError,
            auth.RevokedIdTokenError, auth.CertificateFetchError) as e:
        logger.warning(f"Token verification failed: {type(e).__name__}")
        return None


def identity_from_claims(claims: Optional[Dict[str, Any]]) -> Optional[str]:
    """Extract the caller identity (lower-cased email) from verified claims"""
    if not claims:
        return None
    email = claims.get("email")
    if not email:
        return None
    return email.strip().lower()
