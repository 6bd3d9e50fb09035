"""
Shared fixtures: an app on in-memory SQLite and a fake identity provider.

Bearer tokens of the form ``token:<email>`` verify as ``<email>``; anything
else is rejected, as an invalid Firebase ID token would be.
"""

import pytest
from fastapi.testclient import TestClient

from artisans_echo.core import security
from artisans_echo.core.config import Settings
from artisans_echo.core.database import AppContext
from artisans_echo.main import create_app


TOKEN_PREFIX = "token:"


def fake_verify_id_token(token):
    if token.startswith(TOKEN_PREFIX) and "@" in token:
        return {"uid": "test-uid", "email": token[len(TOKEN_PREFIX):]}
    return None


@pytest.fixture
def app_settings():
    return Settings(DATABASE_URL="sqlite://", LOG_LEVEL="WARNING")


@pytest.fixture
def client(app_settings, monkeypatch):
    monkeypatch.setattr(security, "verify_id_token", fake_verify_id_token)
    app = create_app(app_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session(client):
    """Session on the same database the client talks to"""
    session = client.app.state.context.session()
    yield session
    session.close()


@pytest.fixture
def context():
    """Standalone store for service-level tests"""
    ctx = AppContext("sqlite://")
    assert ctx.connect()
    yield ctx
    ctx.dispose()


@pytest.fixture
def db(context):
    session = context.session()
    yield session
    session.close()


@pytest.fixture
def auth_headers():
    def _headers(email):
        return {"Authorization": f"Bearer {TOKEN_PREFIX}{email}"}
    return _headers


def artwork_payload(**overrides):
    payload = {
        "image_url": "https://i.ibb.co/7kQ2x1n/sunset.jpg",
        "title": "Sunset over the Bay",
        "category": "Painting",
        "artist_email": "ana@artisans.dev",
        "artist_name": "Ana Costa",
        "medium": "Oil on canvas",
        "description": "Evening light",
        "dimensions": "40x60 cm",
        "price": "350",
        "visibility": "Public",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def create_artwork(client):
    def _create(**overrides):
        resp = client.post("/artworks", json=artwork_payload(**overrides))
        assert resp.status_code == 201, resp.text
        return resp.json()["data"]
    return _create
