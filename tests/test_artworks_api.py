"""
Tests for the artworks API.

Covers:
  - Create returns an id; the stored record starts with no likes
  - Missing fields, bad image URLs and bad emails are rejected with 400
  - Malformed and unknown ids answer 404
  - Update/Delete need a token and are owner-only
  - Listings: pagination, search, category, latest, owner listing
"""

import uuid
from datetime import datetime, timedelta, timezone

from artisans_echo.models.artwork import Artwork
from tests.conftest import artwork_payload


OWNER = "ana@artisans.dev"
OTHER = "ben@artisans.dev"


# ---------------------------------------------------------------------------
# Create / read
# ---------------------------------------------------------------------------

def test_create_then_read(client):
    resp = client.post("/artworks", json=artwork_payload())
    assert resp.status_code == 201
    body = resp.json()
    assert body["ok"] is True
    artwork_id = body["inserted_id"]
    assert body["data"]["id"] == artwork_id

    resp = client.get(f"/artwork/{artwork_id}")
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["likes"] == 0
    assert data["liked_by"] == []
    assert data["title"] == "Sunset over the Bay"
    assert data["visibility"] == "Public"
    assert data["created_at"]
    assert data["updated_at"] is None


def test_create_normalizes_artist_email(client):
    resp = client.post("/artworks", json=artwork_payload(artist_email="Ana@Artisans.dev"))
    assert resp.status_code == 201
    assert resp.json()["data"]["artist_email"] == OWNER


def test_create_missing_required_field(client):
    payload = artwork_payload()
    del payload["title"]
    resp = client.post("/artworks", json=payload)
    assert resp.status_code == 400
    assert resp.json()["ok"] is False


def test_create_blank_required_field(client):
    resp = client.post("/artworks", json=artwork_payload(artist_name="   "))
    assert resp.status_code == 400


def test_create_rejects_bad_image_url(client):
    resp = client.post("/artworks", json=artwork_payload(image_url="not a url"))
    assert resp.status_code == 400
    resp = client.post("/artworks", json=artwork_payload(image_url="ftp://host/pic.jpg"))
    assert resp.status_code == 400


def test_create_rejects_bad_email(client):
    resp = client.post("/artworks", json=artwork_payload(artist_email="not-an-email"))
    assert resp.status_code == 400


def test_create_as_someone_else_is_forbidden(client, auth_headers):
    resp = client.post("/artworks", json=artwork_payload(), headers=auth_headers(OTHER))
    assert resp.status_code == 403


def test_create_with_own_token(client, auth_headers):
    resp = client.post("/artworks", json=artwork_payload(), headers=auth_headers(OWNER))
    assert resp.status_code == 201


def test_read_malformed_id(client):
    resp = client.get("/artwork/not-an-id")
    assert resp.status_code == 404
    assert resp.json() == {"ok": False, "error": "Artwork not found"}


def test_read_unknown_id(client):
    resp = client.get(f"/artwork/{uuid.uuid4()}")
    assert resp.status_code == 404


# ---------------------------------------------------------------------------
# Update / delete
# ---------------------------------------------------------------------------

def test_update_by_owner(client, create_artwork, auth_headers):
    artwork = create_artwork()
    resp = client.patch(
        f"/artwork/{artwork['id']}",
        json={"title": "Dawn", "visibility": "Private"},
        headers=auth_headers(OWNER),
    )
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["title"] == "Dawn"
    assert data["visibility"] == "Private"
    assert data["category"] == "Painting"
    assert data["updated_at"] is not None


def test_update_by_non_owner_is_forbidden(client, create_artwork, auth_headers):
    artwork = create_artwork()
    resp = client.patch(f"/artwork/{artwork['id']}", json={"title": "Mine now"}, headers=auth_headers(OTHER))
    assert resp.status_code == 403

    resp = client.get(f"/artwork/{artwork['id']}")
    assert resp.json()["data"]["title"] == "Sunset over the Bay"


def test_update_requires_token(client, create_artwork):
    artwork = create_artwork()
    resp = client.patch(f"/artwork/{artwork['id']}", json={"title": "Dawn"})
    assert resp.status_code == 401
    assert resp.headers["www-authenticate"] == "Bearer"


def test_update_rejects_invalid_token(client, create_artwork):
    artwork = create_artwork()
    resp = client.patch(
        f"/artwork/{artwork['id']}",
        json={"title": "Dawn"},
        headers={"Authorization": "Bearer garbage"},
    )
    assert resp.status_code == 401


def test_update_unknown_artwork(client, auth_headers):
    resp = client.patch(f"/artwork/{uuid.uuid4()}", json={"title": "Dawn"}, headers=auth_headers(OWNER))
    assert resp.status_code == 404


def test_update_rejects_blank_required_fields(client, create_artwork, auth_headers):
    artwork = create_artwork()
    for field in ("title", "category", "artist_name"):
        resp = client.patch(f"/artwork/{artwork['id']}", json={field: "   "}, headers=auth_headers(OWNER))
        assert resp.status_code == 400, field

    data = client.get(f"/artwork/{artwork['id']}").json()["data"]
    assert data["title"] == "Sunset over the Bay"
    assert data["category"] == "Painting"
    assert data["artist_name"] == "Ana Costa"


def test_update_strips_required_fields(client, create_artwork, auth_headers):
    artwork = create_artwork()
    resp = client.patch(f"/artwork/{artwork['id']}", json={"title": "  Dawn  "}, headers=auth_headers(OWNER))
    assert resp.status_code == 200
    assert resp.json()["data"]["title"] == "Dawn"


def test_update_cannot_touch_likes(client, create_artwork, auth_headers):
    artwork = create_artwork()
    resp = client.patch(
        f"/artwork/{artwork['id']}",
        json={"likes": 99, "artist_email": OTHER},
        headers=auth_headers(OWNER),
    )
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["likes"] == 0
    assert data["artist_email"] == OWNER


def test_delete_by_owner(client, create_artwork, auth_headers):
    artwork = create_artwork()
    resp = client.delete(f"/artwork/{artwork['id']}", headers=auth_headers(OWNER))
    assert resp.status_code == 200
    assert client.get(f"/artwork/{artwork['id']}").status_code == 404


def test_delete_by_non_owner_is_forbidden(client, create_artwork, auth_headers):
    artwork = create_artwork()
    resp = client.delete(f"/artwork/{artwork['id']}", headers=auth_headers(OTHER))
    assert resp.status_code == 403
    assert client.get(f"/artwork/{artwork['id']}").status_code == 200


def test_delete_unknown_artwork(client, auth_headers):
    resp = client.delete(f"/artwork/{uuid.uuid4()}", headers=auth_headers(OWNER))
    assert resp.status_code == 404


# ---------------------------------------------------------------------------
# Listings
# ---------------------------------------------------------------------------

def test_pagination_over_25_public_artworks(client, create_artwork, db_session):
    base = datetime(2026, 1, 1, tzinfo=timezone.utc)
    ids = [create_artwork(title=f"Piece {i}")["id"] for i in range(25)]
    for i, artwork_id in enumerate(ids):
        db_session.query(Artwork).filter(Artwork.id == artwork_id).update(
            {"created_at": base + timedelta(minutes=i)}, synchronize_session=False
        )
    db_session.commit()
    create_artwork(title="Hidden", visibility="Private")

    page1 = client.get("/artworks", params={"page": 1}).json()
    assert len(page1["data"]) == 12
    assert page1["meta"]["total"] == 25
    assert page1["meta"]["total_pages"] == 3
    assert page1["meta"]["has_next"] is True
    assert page1["data"][0]["title"] == "Piece 24"

    page3 = client.get("/artworks", params={"page": 3, "limit": 12}).json()
    assert len(page3["data"]) == 1
    assert page3["data"][0]["title"] == "Piece 0"
    assert page3["meta"]["has_next"] is False


def test_listing_filters_by_search_and_category(client, create_artwork):
    create_artwork(title="Blue Horse", category="Painting")
    create_artwork(title="Blue Vase", category="Ceramics")
    create_artwork(title="Red Sky", category="Painting")

    body = client.get("/artworks", params={"search": "blue", "category": "Painting"}).json()
    assert [a["title"] for a in body["data"]] == ["Blue Horse"]

    body = client.get("/artworks", params={"category": "all"}).json()
    assert body["meta"]["total"] == 3


def test_all_artworks_is_unpaginated(client, create_artwork):
    for i in range(15):
        create_artwork(title=f"Piece {i}")
    body = client.get("/all-artworks").json()
    assert len(body["data"]) == 15


def test_latest_and_featured(client, create_artwork):
    for i in range(8):
        create_artwork(title=f"Piece {i}")
    create_artwork(title="Secret", visibility="Private")

    for path in ("/latest-artworks", "/featured-artworks"):
        data = client.get(path).json()["data"]
        assert [a["title"] for a in data] == [f"Piece {i}" for i in range(7, 1, -1)]


def test_my_artworks_includes_private(client, create_artwork):
    create_artwork(title="Open")
    create_artwork(title="Closed", visibility="Private")
    create_artwork(title="Not mine", artist_email=OTHER)

    data = client.get(f"/my-artworks/{OWNER}").json()["data"]
    assert sorted(a["title"] for a in data) == ["Closed", "Open"]


def test_search_matches_artist_name(client, create_artwork):
    create_artwork(title="Untitled", artist_name="Frida Kahlo", artist_email="frida@artisans.dev")
    create_artwork(title="Other work")

    data = client.get("/artworks/search/kahlo").json()["data"]
    assert [a["title"] for a in data] == ["Untitled"]


def test_search_is_literal(client, create_artwork):
    create_artwork(title="100% Cotton")
    create_artwork(title="Plain Linen")

    data = client.get("/artworks/search/%25").json()["data"]
    assert [a["title"] for a in data] == ["100% Cotton"]

    data = client.get("/artworks/search/_").json()["data"]
    assert data == []


def test_search_skips_private(client, create_artwork):
    create_artwork(title="Moonrise", visibility="Private")
    assert client.get("/artworks/search/moon").json()["data"] == []


def test_category_route(client, create_artwork):
    create_artwork(title="Bust", category="Sculpture")
    create_artwork(title="Canvas", category="Painting")

    data = client.get("/artworks/category/Sculpture").json()["data"]
    assert [a["title"] for a in data] == ["Bust"]
