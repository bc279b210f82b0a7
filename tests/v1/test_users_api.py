# mypy: ignore-errors
# tests/v1/test_users_api.py
"""Tests for identity registration endpoints."""

import re

from fastapi import status

from footprint_api.models import Footprint, User


def test_register_new_identity(client, db_session, serial_counter) -> None:
    response = client.post("/api/v1/users/", json={"email": "a@x.io"})

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["serial"] == 1002
    assert data["existed"] is False
    assert re.fullmatch(r"fp-1002-[a-z0-9]{4}", data["slug"])
    page = db_session.query(Footprint).filter(Footprint.slug == data["slug"]).one()
    assert page.is_primary is True


def test_register_is_idempotent(client, db_session, serial_counter) -> None:
    first = client.post("/api/v1/users/", json={"email": "a@x.io"}).json()
    second = client.post("/api/v1/users/", json={"email": "A@X.io"}).json()

    assert second == {"serial": first["serial"], "existed": True, "slug": None}
    assert db_session.query(User).count() == 1


def test_register_rejects_bad_email(client) -> None:
    response = client.post("/api/v1/users/", json={"email": "nobody"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"error": "Email required", "kind": "validation"}


def test_register_requires_email_field(client) -> None:
    response = client.post("/api/v1/users/", json={})
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_serial_conflict_is_409(client, db_session, serial_counter) -> None:
    db_session.add(User(email="racer@x.io", serial_number=1002))
    db_session.flush()

    response = client.post("/api/v1/users/", json={"email": "a@x.io"})

    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.json()["kind"] == "conflict"


def test_next_serial_preview(client, owner) -> None:
    response = client.get("/api/v1/users/next-serial")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"serial": owner.serial + 1}
    assert client.get("/api/v1/users/next-serial").json() == {"serial": owner.serial + 1}
