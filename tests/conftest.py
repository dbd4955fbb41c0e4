"""Shared test fixtures."""

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from valentactics.core.gift.catalog import GiftCatalog
from valentactics.main import app


@pytest.fixture()
def client() -> Iterator[TestClient]:
    """FastAPI TestClient with the application lifespan running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def catalog() -> GiftCatalog:
    """Bundled gift catalog."""
    return GiftCatalog.default()
