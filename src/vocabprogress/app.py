"""Application wiring for the progress core."""
import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from vocabprogress.config import settings
from vocabprogress.logging_config import setup_logging
from vocabprogress.models.base import SessionLocal, init_db
from vocabprogress.models.progress_models import ActivityStats
from vocabprogress.monitoring import start_monitoring
from vocabprogress.services.clock import Clock
from vocabprogress.services.collection_service import CollectionService
from vocabprogress.services.game_service import GameService
from vocabprogress.services.store import ProgressStore, SQLAlchemyBackend, StoreBackend
from vocabprogress.services.streak_service import StreakService
from vocabprogress.services.word_service import WordProgressService


class VocabProgress:
    """Builds the progress store once and the services that share it."""

    def __init__(
        self,
        backend: Optional[StoreBackend] = None,
        clock: Optional[Clock] = None,
        engine: Optional[Engine] = None,
        configure_logging: bool = False,
    ):
        """Initialize the application.

        Without a backend the store is kept in the database, on the given
        engine or on the configured DATABASE_URL.
        """
        if configure_logging:
            setup_logging()
        self.logger = logging.getLogger(__name__)
        self.db: Optional[Session] = None

        if backend is None:
            if engine is None:
                init_db()
                self.db = SessionLocal()
            else:
                init_db(bind=engine)
                self.db = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
            backend = SQLAlchemyBackend(self.db)
            self.logger.info("Database initialized")

        self.store = ProgressStore(backend, clock=clock)
        self.streaks = StreakService(self.store)
        self.words = WordProgressService(self.store, self.streaks)
        self.collections = CollectionService(self.store)
        self.games = GameService(self.store)

        if settings.monitoring.port is not None:
            start_monitoring(settings.monitoring.port)
            self.logger.info(f"Metrics exposed on port {settings.monitoring.port}")

    @property
    def stats(self) -> ActivityStats:
        """Read-only snapshot of activity statistics."""
        return self.store.stats

    def close(self) -> None:
        """Flush the store and release the database session."""
        self.store.commit()
        if self.db:
            self.db.close()
            self.db = None
            self.logger.info("Database session closed")
