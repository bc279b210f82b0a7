# tests/test_app.py
"""Tests for application wiring and error rendering."""

import json

import pytest
from fastapi import status
from sqlalchemy.exc import OperationalError

from footprint_api.api.v1.dependencies import get_url_parser
from footprint_api.main import footprint_error_handler
from footprint_api.services.errors import ForbiddenError


def test_health(client) -> None:
    response = client.get("/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok"}


def test_root(client) -> None:
    assert client.get("/").json()["docs"] == "/docs"


def test_store_outage_is_503(client, app, owner, auth_headers) -> None:
    def _locked(url):
        raise OperationalError("UPDATE content", {}, Exception("database is locked"))

    app.dependency_overrides[get_url_parser] = lambda: _locked
    try:
        response = client.post(
            "/api/v1/content/",
            json={"footprint_id": owner.footprint.id, "url": "https://example.com"},
            headers=auth_headers,
        )
    finally:
        app.dependency_overrides.pop(get_url_parser, None)

    assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
    assert response.json()["kind"] == "unavailable"


@pytest.mark.asyncio
async def test_error_handler_renders_kind() -> None:
    response = await footprint_error_handler(None, ForbiddenError("Not your footprint"))

    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert json.loads(response.body) == {"error": "Not your footprint", "kind": "forbidden"}
