"""Persisted user progress store and its storage backends."""
import copy
import logging
from typing import Any, Dict, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vocabprogress import monitoring
from vocabprogress.config import settings
from vocabprogress.models.models import ProgressSnapshot
from vocabprogress.models.progress_models import ActivityStats, UserProgress, WordProgress
from vocabprogress.services.clock import Clock, SystemClock

logger = logging.getLogger(__name__)


class PersistenceError(Exception):
    """Raised by a backend when the store record cannot be read or written."""


class StoreBackend:
    """Key-value storage with atomic whole-record reads and writes."""

    def load(self, key: str) -> Optional[Dict[str, Any]]:
        raise NotImplementedError

    def save(self, key: str, payload: Dict[str, Any]) -> None:
        raise NotImplementedError


class MemoryBackend(StoreBackend):
    """Dictionary backed storage."""

    def __init__(self, records: Optional[Dict[str, Dict[str, Any]]] = None):
        self.records = records if records is not None else {}

    def load(self, key: str) -> Optional[Dict[str, Any]]:
        record = self.records.get(key)
        return copy.deepcopy(record) if record is not None else None

    def save(self, key: str, payload: Dict[str, Any]) -> None:
        self.records[key] = copy.deepcopy(payload)


class SQLAlchemyBackend(StoreBackend):
    """Stores the record as a JSON payload in the progress_snapshots table."""

    def __init__(self, db: Session):
        """Initialize the backend with a database session."""
        self.db = db

    def load(self, key: str) -> Optional[Dict[str, Any]]:
        try:
            snapshot = self.db.query(ProgressSnapshot).filter(ProgressSnapshot.key == key).first()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"Failed to load record {key}: {e}") from e
        return snapshot.payload if snapshot else None

    def save(self, key: str, payload: Dict[str, Any]) -> None:
        try:
            snapshot = self.db.query(ProgressSnapshot).filter(ProgressSnapshot.key == key).first()
            if snapshot is None:
                snapshot = ProgressSnapshot(key=key, payload=payload)
                self.db.add(snapshot)
            else:
                snapshot.payload = payload
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"Failed to save record {key}: {e}") from e


class ProgressStore:
    """In-memory authoritative progress record with whole-record write-back."""

    def __init__(
        self,
        backend: StoreBackend,
        clock: Optional[Clock] = None,
        key: Optional[str] = None,
    ):
        self.backend = backend
        self.clock = clock or SystemClock()
        self.key = key or settings.store.store_key
        self.last_save_failed = False
        self.state = self._load()

    def _load(self) -> UserProgress:
        """Load the record, falling back to defaults when missing or unreadable."""
        try:
            data = self.backend.load(self.key)
        except PersistenceError as e:
            logger.error(f"Error loading progress store: {e}")
            return UserProgress()

        if data is None:
            logger.info(f"No stored progress under {self.key}, starting fresh")
            return UserProgress()

        try:
            state = UserProgress.from_data(data)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error(f"Stored progress under {self.key} is unreadable, starting fresh: {e}")
            return UserProgress()

        logger.info(f"Loaded progress for {len(state.word_states)} words")
        return state

    def commit(self) -> bool:
        """Write the whole record back. Returns False if the write failed."""
        try:
            self.backend.save(self.key, self.state.to_data())
        except PersistenceError as e:
            self.last_save_failed = True
            monitoring.store_write_failures.labels(error_type=type(e.__cause__ or e).__name__).inc()
            logger.warning(f"Progress store write failed, keeping in-memory state: {e}")
            return False

        self.last_save_failed = False
        monitoring.store_writes.inc()
        logger.debug(f"Saved progress store {self.key}")
        return True

    def now_ms(self) -> int:
        return self.clock.now_ms()

    def get_word_state(self, word_id: str) -> WordProgress:
        """Get a snapshot of a word's state without materializing it."""
        state = self.state.word_states.get(word_id)
        if state is None:
            return WordProgress(word_id=word_id)
        return WordProgress.from_data(state.to_data())

    def ensure_word_state(self, word_id: str) -> WordProgress:
        """Get the state of a word, creating a default record on first access."""
        state = self.state.word_states.get(word_id)
        if state is None:
            state = WordProgress(word_id=word_id)
            self.state.word_states[word_id] = state
        return state

    @property
    def stats(self) -> ActivityStats:
        """Read-only snapshot of activity statistics."""
        return self.state.stats.copy()
