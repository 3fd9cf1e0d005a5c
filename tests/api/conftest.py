"""Shared fixtures for API tests."""

from __future__ import annotations

import httpx
import pytest

from wnb.api.app import app


@pytest.fixture
def test_app():
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(test_app):
    """httpx AsyncClient wired to the test app."""
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def rectangle_points():
    return [
        {"cgIn": 100.0, "weightLb": 2000.0},
        {"cgIn": 140.0, "weightLb": 2000.0},
        {"cgIn": 140.0, "weightLb": 2500.0},
        {"cgIn": 100.0, "weightLb": 2500.0},
    ]
