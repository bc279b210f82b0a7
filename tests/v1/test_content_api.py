# mypy: ignore-errors
# tests/v1/test_content_api.py
"""Tests for page-scoped content endpoints."""

import re

from fastapi import status

from footprint_api.core.security import create_access_token
from footprint_api.models import User

CLIP_A = "https://www.youtube.com/watch?v=aaaaaaaaaaa"
CLIP_B = "https://youtu.be/bbbbbbbbbbb"


def _add(client, headers, footprint_id, url):
    return client.post(
        "/api/v1/content/", json={"footprint_id": footprint_id, "url": url}, headers=headers
    )


def _list(client, footprint_id):
    response = client.get("/api/v1/content/", params={"footprint_id": footprint_id})
    assert response.status_code == status.HTTP_200_OK
    return response.json()["content"]


def test_register_add_swap_delete(client, db_session, serial_counter) -> None:
    registered = client.post("/api/v1/users/", json={"email": "a@x.io"}).json()
    assert registered["serial"] == 1002
    assert re.fullmatch(r"fp-1002-[a-z0-9]{4}", registered["slug"])

    user = db_session.query(User).filter(User.email == "a@x.io").one()
    headers = {"Authorization": f"Bearer {create_access_token(user.id)}"}
    gate = client.get(f"/api/v1/footprints/{registered['slug']}", headers=headers).json()
    footprint_id = gate["footprint"]["id"]

    first = _add(client, headers, footprint_id, CLIP_A).json()
    second = _add(client, headers, footprint_id, CLIP_B).json()
    assert (first["position"], second["position"]) == (0, 1)
    assert first["type"] == second["type"] == "youtube"

    swap = client.post(
        "/api/v1/content/reorder",
        json={
            "footprint_id": footprint_id,
            "updates": [
                {"id": first["id"], "position": 1},
                {"id": second["id"], "position": 0},
            ],
        },
        headers=headers,
    )
    assert swap.json() == {"success": True, "applied": [first["id"], second["id"]], "skipped": []}
    assert [item["id"] for item in _list(client, footprint_id)] == [second["id"], first["id"]]

    deleted = client.delete(
        "/api/v1/content/",
        params={"footprint_id": footprint_id, "id": first["id"]},
        headers=headers,
    )
    assert deleted.json() == {"success": True, "deleted_count": 1}
    assert [item["id"] for item in _list(client, footprint_id)] == [second["id"]]


def test_add_requires_token(client, owner) -> None:
    response = _add(client, {}, owner.footprint.id, CLIP_A)
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_add_to_foreign_page_is_forbidden(client, owner, stranger_headers) -> None:
    response = _add(client, stranger_headers, owner.footprint.id, CLIP_A)

    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json() == {"error": "Not your footprint", "kind": "forbidden"}
    assert _list(client, owner.footprint.id) == []


def test_reorder_skips_foreign_tiles(client, owner, stranger, auth_headers, stranger_headers) -> None:
    mine = _add(client, auth_headers, owner.footprint.id, CLIP_A).json()
    theirs = _add(client, stranger_headers, stranger.footprint.id, CLIP_B).json()

    response = client.post(
        "/api/v1/content/reorder",
        json={
            "footprint_id": owner.footprint.id,
            "updates": [{"id": theirs["id"], "position": 5}, {"id": mine["id"], "position": 3}],
        },
        headers=auth_headers,
    )

    assert response.json() == {"success": False, "applied": [mine["id"]], "skipped": [theirs["id"]]}
    assert _list(client, stranger.footprint.id)[0]["position"] == 0


def test_reorder_rejects_negative_positions(client, owner, auth_headers) -> None:
    response = client.post(
        "/api/v1/content/reorder",
        json={"footprint_id": owner.footprint.id, "updates": [{"id": "x", "position": -1}]},
        headers=auth_headers,
    )
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_delete_foreign_tile_through_own_page(client, owner, stranger, auth_headers, stranger_headers) -> None:
    theirs = _add(client, stranger_headers, stranger.footprint.id, CLIP_B).json()

    response = client.delete(
        "/api/v1/content/",
        params={"footprint_id": owner.footprint.id, "id": theirs["id"]},
        headers=auth_headers,
    )

    assert response.json() == {"success": True, "deleted_count": 0}
    assert len(_list(client, stranger.footprint.id)) == 1


def test_listing_unknown_page_is_empty(client) -> None:
    assert _list(client, "missing") == []
