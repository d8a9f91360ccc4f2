"""Service for recording practice game results."""
import logging
from typing import List

from vocabprogress.config import settings
from vocabprogress.models.progress_models import GameResult
from vocabprogress.services.store import ProgressStore

logger = logging.getLogger(__name__)


class GameService:
    """Keeps a bounded log of completed practice sessions."""

    def __init__(self, store: ProgressStore):
        """Initialize the service with the progress store."""
        self.store = store
        self.results_limit = settings.learning.game_results_limit

    def add_game_result(self, result: GameResult) -> None:
        """Append a result, dropping the oldest beyond the limit."""
        if not result.completed_at:
            result.completed_at = self.store.now_ms()
        results = self.store.state.game_results
        results.append(result)
        del results[:-self.results_limit]
        logger.info(
            f"Game {result.game_type.value} finished: "
            f"{result.correct_answers}/{result.total_questions} correct"
        )
        self.store.commit()

    def recent_game_results(self) -> List[GameResult]:
        """Stored results, oldest first."""
        return list(self.store.state.game_results)
