"""
FastAPI dependencies for authentication
"""
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import Optional
import logging

from artisans_echo.core import security
from artisans_echo.core.exceptions import Unauthorized

logger = logging.getLogger(__name__)

# HTTP Bearer token scheme; missing credentials are reported as Unauthorized below
bearer_scheme = HTTPBearer(auto_error=False)


def _resolve_identity(credentials: HTTPAuthorizationCredentials) -> str:
    claims = security.verify_id_token(credentials.credentials)
    identity = security.identity_from_claims(claims)
    if identity is None:
        logger.info("Rejected bearer token without a verified email identity")
        raise Unauthorized()
    return identity


def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    """
    Dependency to get the caller's verified identity (email)

    Raises:
        Unauthorized: If the token is missing or does not verify
    """
    if credentials is None:
        raise Unauthorized("Authentication required")
    return _resolve_identity(credentials)


def get_optional_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    """
    Dependency for endpoints that work with or without auth

    Returns None when no token is sent. A token that is sent must verify.
    """
    if credentials is None:
        return None
    return _resolve_identity(credentials)
