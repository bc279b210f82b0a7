# mypy: ignore-errors
# tests/v1/test_footprints_api.py
"""Tests for the ownership gate and page endpoints."""

from fastapi import status

from footprint_api.services.parser import parse_url
from footprint_api.services.tile_store import PageScope, SerialScope, add_tile, register_media


def test_anonymous_caller_is_not_owner(client, owner) -> None:
    response = client.get(f"/api/v1/footprints/{owner.footprint.slug}")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"owned": False}


def test_stranger_is_not_owner(client, owner, stranger_headers) -> None:
    response = client.get(f"/api/v1/footprints/{owner.footprint.slug}", headers=stranger_headers)
    assert response.json() == {"owned": False}


def test_unknown_slug_is_not_owner(client, auth_headers) -> None:
    response = client.get("/api/v1/footprints/fp-0-none", headers=auth_headers)
    assert response.json() == {"owned": False}


def test_invalid_token_is_anonymous(client, owner) -> None:
    response = client.get(
        f"/api/v1/footprints/{owner.footprint.slug}",
        headers={"Authorization": "Bearer not-a-token"},
    )
    assert response.json() == {"owned": False}


def test_owner_gets_page_and_tiles(client, db_session, owner, auth_headers) -> None:
    add_tile(db_session, PageScope(owner.footprint.id), parse_url("https://youtu.be/dQw4w9WgXcQ"))
    register_media(db_session, SerialScope(owner.serial), "https://cdn.example.com/a.png")

    response = client.get(f"/api/v1/footprints/{owner.footprint.slug}", headers=auth_headers)

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["owned"] is True
    assert data["footprint"]["slug"] == owner.footprint.slug
    assert [item["type"] for item in data["content"]] == ["youtube"]
    assert data["content"][0]["source"] == "content"
    assert data["tiles"][0]["source"] == "library"
    assert data["tiles"][0]["url"] == "https://cdn.example.com/a.png"


def test_list_and_create_pages(client, owner, auth_headers) -> None:
    created = client.post(
        "/api/v1/footprints/", json={"name": "Music", "icon": "♪"}, headers=auth_headers
    )
    assert created.status_code == status.HTTP_201_CREATED
    assert created.json()["is_primary"] is False

    response = client.get("/api/v1/footprints/", headers=auth_headers)

    assert response.status_code == status.HTTP_200_OK
    names = [page["name"] for page in response.json()]
    assert names == ["Everything", "Music"]


def test_listing_pages_requires_token(client, owner) -> None:
    response = client.get("/api/v1/footprints/")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_public_page(client, owner) -> None:
    response = client.get(f"/api/v1/footprints/{owner.footprint.slug}/public")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["footprint"]["view_count"] == 1
    assert data["content"] == []


def test_public_page_not_found(client) -> None:
    response = client.get("/api/v1/footprints/fp-0-none/public")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": "Footprint not found", "kind": "not_found"}
