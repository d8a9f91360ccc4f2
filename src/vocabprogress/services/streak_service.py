"""Streak service for daily activity continuity and counters."""
import logging
from datetime import date, timedelta
from typing import List, Optional, Sequence

from vocabprogress import monitoring
from vocabprogress.models.progress_models import WEEK_DAYS, ActivityStats, empty_week
from vocabprogress.services.store import ProgressStore

logger = logging.getLogger(__name__)


def fresh_week() -> List[bool]:
    """Weekly window where only today is active."""
    week = empty_week()
    week[0] = True
    return week


def compute_weekly_activity(
    last_active_date: Optional[str],
    current_activity: Sequence[bool],
    today: date,
) -> List[bool]:
    """Shift the 7-day window by the days elapsed since last activity and mark today.

    Index 0 is today. Entries shifted past the oldest slot are dropped and the
    newly exposed days are inactive. A window older than a week, or a last
    active date in the future, starts over.
    """
    if not last_active_date:
        return fresh_week()

    diff_days = (today - date.fromisoformat(last_active_date)).days

    if diff_days == 0:
        week = list(current_activity)
    elif 0 < diff_days < WEEK_DAYS:
        week = empty_week()
        for i in range(diff_days, WEEK_DAYS):
            week[i] = bool(current_activity[i - diff_days])
    else:
        return fresh_week()

    week[0] = True
    return week


def next_streak(stats: ActivityStats, today: date) -> int:
    """Streak length after activity today."""
    yesterday = (today - timedelta(days=1)).isoformat()
    if stats.last_active_date == yesterday:
        return stats.current_streak + 1
    return 1


class StreakService:
    """Service for daily streaks, the weekly window and practice counters."""

    def __init__(self, store: ProgressStore):
        """Initialize the service with the progress store."""
        self.store = store

    def update_streak(self) -> ActivityStats:
        """Count today as active, evaluated against the calendar date at call time."""
        today = self.store.clock.today()
        today_str = today.isoformat()
        stats = self.store.state.stats

        if stats.last_active_date == today_str:
            return self.store.stats

        streak = next_streak(stats, today)
        stats.weekly_activity = compute_weekly_activity(stats.last_active_date, stats.weekly_activity, today)
        stats.current_streak = streak
        stats.longest_streak = max(stats.longest_streak, streak)
        stats.last_active_date = today_str
        monitoring.current_streak.set(streak)
        logger.debug(f"Streak updated: current {stats.current_streak}, longest {stats.longest_streak}")

        self.store.commit()
        return self.store.stats

    def increment_practice_count(self) -> ActivityStats:
        """Count a completed practice session."""
        self.store.state.stats.total_practices += 1
        monitoring.practice_sessions.inc()
        self.store.commit()
        return self.store.stats

    def get_stats(self) -> ActivityStats:
        """Get a snapshot of activity statistics."""
        return self.store.stats
