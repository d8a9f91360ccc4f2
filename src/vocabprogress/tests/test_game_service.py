"""Tests for game service."""
import pytest

from vocabprogress.models.progress_models import GameResult, GameType
from vocabprogress.services.clock import FixedClock
from vocabprogress.services.game_service import GameService
from vocabprogress.services.store import ProgressStore


@pytest.fixture
def game_service(store: ProgressStore) -> GameService:
    """Create a game service instance."""
    return GameService(store)


def make_result(correct: int = 3) -> GameResult:
    return GameResult(
        game_type=GameType.MEANING_MATCH,
        total_questions=5,
        correct_answers=correct,
        incorrect_answers=5 - correct,
        time_spent=42.5,
        words_to_review=["w1"],
    )


def test_add_game_result_stamps_completion(game_service: GameService, clock: FixedClock) -> None:
    """Test that a missing completion time is filled in."""
    game_service.add_game_result(make_result())

    results = game_service.recent_game_results()
    assert len(results) == 1
    assert results[0].completed_at == clock.now_ms()


def test_game_results_are_bounded(game_service: GameService) -> None:
    """Test that only the most recent results are kept."""
    for i in range(60):
        game_service.add_game_result(make_result(correct=i % 6))

    results = game_service.recent_game_results()
    assert len(results) == 50
    assert results[-1].correct_answers == 59 % 6


def test_game_results_persist(game_service: GameService, clock: FixedClock) -> None:
    """Test that results survive a reload."""
    game_service.add_game_result(make_result())

    reloaded = ProgressStore(game_service.store.backend, clock=clock)
    assert reloaded.state.game_results[0].game_type == GameType.MEANING_MATCH
    assert reloaded.state.game_results[0].time_spent == 42.5
