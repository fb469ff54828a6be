"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from src.db.memory_repository import InMemoryGameRepository
from src.main import create_app


@pytest.fixture
def repository() -> Iterator[InMemoryGameRepository]:
    """Fresh in-memory store. Cleared at teardown to keep tests independent of each other."""
    repo = InMemoryGameRepository()
    try:
        yield repo
    finally:
        repo.clear()


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Test client running the full app, including its lifespan (so the store is set up and torn down)."""
    with TestClient(create_app()) as test_client:
        yield test_client
