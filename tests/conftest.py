"""
Shared fixtures for the Card Store API tests.

Every test gets its own application (and therefore its own seeded
store), so mutations never leak between tests.
"""

from typing import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from card_store_api.app.core.store import CardStore
from card_store_api.app.main import create_app


@pytest.fixture
def store() -> CardStore:
    """A store holding the three seed cards (ids 1-3)."""
    return CardStore()


@pytest.fixture
def app(store: CardStore) -> FastAPI:
    return create_app(store=store)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    """Test client that runs the app lifespan and returns 500 responses instead of raising."""
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
