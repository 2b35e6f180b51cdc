"""Shared fixtures for news quiz tests."""

import pytest

from news_quiz.storage import MemoryStorage
from tests.factories import FixedClock


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()
