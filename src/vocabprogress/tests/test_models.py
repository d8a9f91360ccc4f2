"""Tests for database and progress models."""
from typing import Generator

import pytest
from sqlalchemy.orm import Session

from vocabprogress.models.base import SessionLocal, init_db
from vocabprogress.models.models import ProgressSnapshot
from vocabprogress.models.progress_models import ActivityStats, UserProgress, WordProgress


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    init_db()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.query(ProgressSnapshot).delete()
        db.commit()
        db.close()


def test_progress_snapshot_creation(db: Session) -> None:
    """Test snapshot creation."""
    snapshot = ProgressSnapshot(key="test-store", payload={"history": ["a"]})
    db.add(snapshot)
    db.commit()
    db.refresh(snapshot)

    assert snapshot.payload == {"history": ["a"]}
    assert snapshot.created_at is not None
    assert snapshot.updated_at is not None


def test_word_progress_is_due() -> None:
    """Test the due check boundaries."""
    assert WordProgress(word_id="w").is_due(1000) is False
    assert WordProgress(word_id="w", next_review_at=1000).is_due(1000) is True
    assert WordProgress(word_id="w", next_review_at=1001).is_due(1000) is False


def test_activity_stats_defaults() -> None:
    """Test the initial statistics record."""
    stats = ActivityStats()
    assert stats.total_read == 0
    assert stats.current_streak == 0
    assert stats.longest_streak == 0
    assert stats.last_active_date is None
    assert stats.weekly_activity == [False] * 7


def test_weekly_activity_normalized_on_load() -> None:
    """Test that an oversized window is truncated."""
    stats = ActivityStats.from_data({"weekly_activity": [True] * 9})
    assert stats.weekly_activity == [True] * 7


def test_user_progress_ignores_unknown_fields() -> None:
    """Test loading a record written by a newer version."""
    progress = UserProgress.from_data({
        "word_states": {"w1": {"familiarity_score": 1, "difficulty": 0.3}},
        "theme": "dark",
    })
    assert progress.word_states["w1"].familiarity_score == 1
    assert progress.word_states["w1"].word_id == "w1"
