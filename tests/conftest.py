"""
Shared test fixtures.

The courier locator is replaced by an in-process fake so no test needs a
running location service.
"""

from __future__ import annotations

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from tests.fakes import FakeLocator
from valet_delivery.domain.entities import GeoPoint, NamedPoint


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest.fixture
def equator_customers() -> list[NamedPoint]:
    return [
        NamedPoint("A", GeoPoint(0.0, 1.0)),
        NamedPoint("B", GeoPoint(0.0, 0.5)),
        NamedPoint("C", GeoPoint(0.0, 1.0)),
    ]


@pytest.fixture
def fake_locator() -> FakeLocator:
    return FakeLocator(GeoPoint(0.0, 0.0))


@pytest.fixture
def app(fake_locator: FakeLocator) -> FastAPI:
    """The API with the fake locator injected."""
    from valet_delivery.api.app import create_app
    from valet_delivery.api.dependencies import get_locator

    app = create_app()
    app.dependency_overrides[get_locator] = lambda: fake_locator
    return app


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
