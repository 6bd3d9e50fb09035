"""
Tests for Firebase ID token verification.

Token errors mean "not authenticated"; anything else (a misconfigured
Firebase app) propagates instead of turning every caller away with 401.
"""

import pytest
from firebase_admin import auth

from artisans_echo.core import security


@pytest.fixture
def firebase_app(monkeypatch):
    monkeypatch.setattr(security, "get_firebase_app", lambda: None)


def test_valid_token_returns_claims(firebase_app, monkeypatch):
    monkeypatch.setattr(security.auth, "verify_id_token", lambda token, app=None: {"email": "Ana@Artisans.dev"})
    claims = security.verify_id_token("good")
    assert security.identity_from_claims(claims) == "ana@artisans.dev"


def test_invalid_token_returns_none(firebase_app, monkeypatch):
    def reject(token, app=None):
        raise auth.InvalidIdTokenError("malformed token")

    monkeypatch.setattr(security.auth, "verify_id_token", reject)
    assert security.verify_id_token("garbage") is None


def test_misconfiguration_is_not_swallowed(firebase_app, monkeypatch):
    def misconfigured(token, app=None):
        raise ValueError("A project ID is required to access the auth service")

    monkeypatch.setattr(security.auth, "verify_id_token", misconfigured)
    with pytest.raises(ValueError):
        security.verify_id_token("anything")


def test_claims_without_email_have_no_identity():
    assert security.identity_from_claims({"uid": "abc"}) is None
    assert security.identity_from_claims(None) is None
