"""Service for per-word familiarity, review scheduling and flags."""
import logging
from typing import List, Optional

from vocabprogress import monitoring
from vocabprogress.config import settings
from vocabprogress.models.progress_models import ReviewOutcome, WordProgress
from vocabprogress.services.clock import MS_PER_DAY
from vocabprogress.services.store import ProgressStore
from vocabprogress.services.streak_service import StreakService

logger = logging.getLogger(__name__)


class WordProgressService:
    """Service for updating word mastery state from review outcomes."""

    def __init__(self, store: ProgressStore, streak_service: Optional[StreakService] = None):
        """Initialize the service with the progress store."""
        self.store = store
        self.streak_service = streak_service or StreakService(store)
        self.intervals = settings.learning.repetition_intervals
        self.max_familiarity = settings.learning.max_familiarity
        self.history_limit = settings.learning.history_limit

    def _review_interval_ms(self, index: int) -> int:
        """Interval for a ladder position, clamped to the last rung."""
        index = min(max(index, 0), len(self.intervals) - 1)
        return self.intervals[index] * MS_PER_DAY

    def get_word_state(self, word_id: str) -> WordProgress:
        """Get the current state of a word."""
        return self.store.get_word_state(word_id)

    def mark_seen(self, word_id: str) -> WordProgress:
        """Record that the user viewed a word."""
        state = self.store.ensure_word_state(word_id)
        state.last_seen_at = self.store.now_ms()
        self._append_history(word_id)
        self.store.state.stats.total_read += 1
        monitoring.words_seen.inc()
        self._log_outcome(state, ReviewOutcome.SEEN)
        self.store.commit()

        self.streak_service.update_streak()
        return state

    def record_correct(self, word_id: str) -> WordProgress:
        """Raise familiarity and schedule the next review further out."""
        return self._record_correct(word_id, ReviewOutcome.CORRECT)

    def record_incorrect(self, word_id: str) -> WordProgress:
        """Lower familiarity and schedule a review at the shortest interval."""
        state = self.store.ensure_word_state(word_id)
        now = self.store.now_ms()
        state.familiarity_score = max(0, state.familiarity_score - 1)
        state.incorrect_count += 1
        state.last_seen_at = now
        state.next_review_at = now + self._review_interval_ms(0)
        self._log_outcome(state, ReviewOutcome.INCORRECT)
        self.store.commit()
        return state

    def swipe_right(self, word_id: str) -> WordProgress:
        """User knows the word."""
        return self._record_correct(word_id, ReviewOutcome.SWIPE_RIGHT)

    def swipe_left(self, word_id: str) -> WordProgress:
        """User needs to review the word. Familiarity and counters are untouched."""
        state = self.store.ensure_word_state(word_id)
        now = self.store.now_ms()
        state.last_seen_at = now
        state.next_review_at = now + self._review_interval_ms(0)
        self._log_outcome(state, ReviewOutcome.SWIPE_LEFT)
        self.store.commit()
        return state

    def record_answer(self, word_id: str, correct: bool) -> WordProgress:
        """Report a practice game answer."""
        if correct:
            return self.record_correct(word_id)
        return self.record_incorrect(word_id)

    def _record_correct(self, word_id: str, outcome: ReviewOutcome) -> WordProgress:
        state = self.store.ensure_word_state(word_id)
        now = self.store.now_ms()
        state.familiarity_score = min(self.max_familiarity, state.familiarity_score + 1)
        state.correct_count += 1
        state.last_seen_at = now
        state.next_review_at = now + self._review_interval_ms(state.familiarity_score)
        self._log_outcome(state, outcome)
        self.store.commit()
        return state

    def _log_outcome(self, state: WordProgress, outcome: ReviewOutcome) -> None:
        monitoring.review_outcomes.labels(outcome=outcome.value).inc()
        logger.debug(
            f"Word {state.word_id} {outcome.value}: familiarity {state.familiarity_score}, "
            f"next review at {state.next_review_at}"
        )

    def toggle_favorite(self, word_id: str) -> WordProgress:
        """Flip the favorite flag and adjust the favorited counter."""
        state = self.store.ensure_word_state(word_id)
        stats = self.store.state.stats
        state.is_favorite = not state.is_favorite
        if state.is_favorite:
            stats.total_favorited += 1
        else:
            stats.total_favorited = max(0, stats.total_favorited - 1)
        self.store.commit()
        return state

    def toggle_saved(self, word_id: str) -> WordProgress:
        """Flip the saved flag and adjust the saved counter."""
        state = self.store.ensure_word_state(word_id)
        stats = self.store.state.stats
        state.is_saved = not state.is_saved
        if state.is_saved:
            stats.total_saved += 1
        else:
            stats.total_saved = max(0, stats.total_saved - 1)
        self.store.commit()
        return state

    def words_due_for_review(self) -> List[str]:
        """Word IDs due for review, most overdue first."""
        now = self.store.now_ms()
        due = [state for state in self.store.state.word_states.values() if state.is_due(now)]
        due.sort(key=lambda state: state.next_review_at)
        return [state.word_id for state in due]

    def favorite_word_ids(self) -> List[str]:
        """Word IDs marked as favorite."""
        return [state.word_id for state in self.store.state.word_states.values() if state.is_favorite]

    def saved_word_ids(self) -> List[str]:
        """Word IDs marked as saved."""
        return [state.word_id for state in self.store.state.word_states.values() if state.is_saved]

    def _append_history(self, word_id: str) -> None:
        history = self.store.state.history
        if history and history[-1] == word_id:
            return
        history.append(word_id)
        del history[:-self.history_limit]

    def recent_history(self, limit: Optional[int] = None) -> List[str]:
        """Recently viewed word IDs, most recent first."""
        recent = list(reversed(self.store.state.history))
        return recent[:limit] if limit is not None else recent
