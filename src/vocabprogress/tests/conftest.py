"""Test configuration."""
import os
from datetime import datetime
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Set test environment before any imports
os.environ["ENV"] = "test"
os.environ.setdefault("DATABASE_URL", "sqlite://")

# Load test environment variables
test_env_path = Path(__file__).parent.parent.parent.parent / ".env.test"
load_dotenv(test_env_path)

# Import after environment setup
from vocabprogress.services.clock import FixedClock
from vocabprogress.services.store import MemoryBackend, ProgressStore
from vocabprogress.services.streak_service import StreakService
from vocabprogress.services.word_service import WordProgressService


@pytest.fixture
def clock() -> FixedClock:
    """Create a clock fixed at noon on a known day."""
    return FixedClock(datetime(2024, 3, 10, 12, 0))


@pytest.fixture
def backend() -> MemoryBackend:
    """Create an empty in-memory backend."""
    return MemoryBackend()


@pytest.fixture
def store(backend: MemoryBackend, clock: FixedClock) -> ProgressStore:
    """Create a progress store over the in-memory backend."""
    return ProgressStore(backend, clock=clock)


@pytest.fixture
def streak_service(store: ProgressStore) -> StreakService:
    """Create a streak service instance."""
    return StreakService(store)


@pytest.fixture
def word_service(store: ProgressStore, streak_service: StreakService) -> WordProgressService:
    """Create a word progress service instance."""
    return WordProgressService(store, streak_service)
