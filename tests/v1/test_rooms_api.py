# mypy: ignore-errors
# tests/v1/test_rooms_api.py
"""Tests for room endpoints."""

from fastapi import status


def _seed(client, slug):
    return client.post("/api/v1/rooms/seed", json={"slug": slug})


def test_seed_then_refuse(client, owner) -> None:
    for n in range(3):
        client.post("/api/v1/tiles/", json={"slug": owner.footprint.slug, "url": f"https://e.com/{n}"})

    first = _seed(client, owner.footprint.slug)
    assert first.status_code == status.HTTP_200_OK
    data = first.json()
    assert data["message"] == "Created 5 rooms, distributed 3 tiles"
    assert sum(data["distribution"].values()) == 3

    second = _seed(client, owner.footprint.slug).json()
    assert second["message"] == "Already has 5 rooms"
    assert second["distribution"] is None
    assert [room["id"] for room in second["rooms"]] == [room["id"] for room in data["rooms"]]


def test_list_rooms(client, owner) -> None:
    _seed(client, owner.footprint.slug)

    response = client.get(f"/api/v1/rooms/{owner.footprint.slug}")

    assert response.status_code == status.HTTP_200_OK
    assert [room["name"] for room in response.json()] == ["void", "world", "fits", "sound", "archive"]


def test_list_rooms_unknown_slug(client) -> None:
    assert client.get("/api/v1/rooms/fp-0-none").status_code == status.HTTP_404_NOT_FOUND


def test_hide_room(client, owner) -> None:
    room = _seed(client, owner.footprint.slug).json()["rooms"][0]

    response = client.patch(
        "/api/v1/rooms/visibility",
        json={"slug": owner.footprint.slug, "room_id": room["id"], "hidden": True},
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["hidden"] is True


def test_hide_foreign_room(client, owner, stranger) -> None:
    room = _seed(client, stranger.footprint.slug).json()["rooms"][0]

    response = client.patch(
        "/api/v1/rooms/visibility",
        json={"slug": owner.footprint.slug, "room_id": room["id"], "hidden": True},
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND
