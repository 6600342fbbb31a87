import pytest

from memshortener.dao.memory import ShortURLMemoryDAO


@pytest.fixture
def dao() -> ShortURLMemoryDAO:
    """Provide a fresh, empty in-memory store per test."""
    return ShortURLMemoryDAO()
