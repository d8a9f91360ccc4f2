"""Models for user progress data structures."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

WEEK_DAYS = 7


class ReviewOutcome(Enum):
    """Possible outcomes of a user interaction with a word."""
    SEEN = "seen"  # User viewed the word
    CORRECT = "correct"  # User answered correctly
    INCORRECT = "incorrect"  # User answered incorrectly
    SWIPE_RIGHT = "swipe_right"  # User knows the word
    SWIPE_LEFT = "swipe_left"  # User needs to review the word


class GameType(Enum):
    """Practice game modes."""
    MEANING_MATCH = "meaning_match"
    FILL_GAP = "fill_gap"
    MATCH_SYNONYMS = "match_synonyms"
    GUESS_WORD = "guess_word"
    SHUFFLE = "shuffle"


def empty_week() -> List[bool]:
    """Weekly activity window with no active days."""
    return [False] * WEEK_DAYS


def _normalize_week(values: Any) -> List[bool]:
    week = [bool(value) for value in (values or [])][:WEEK_DAYS]
    return week + [False] * (WEEK_DAYS - len(week))


@dataclass
class WordProgress:
    """Mastery and scheduling state of a single word."""
    word_id: str
    familiarity_score: int = 0
    last_seen_at: Optional[int] = None  # ms since epoch
    next_review_at: Optional[int] = None  # ms since epoch
    is_favorite: bool = False
    is_saved: bool = False
    collections: List[str] = field(default_factory=list)
    correct_count: int = 0
    incorrect_count: int = 0

    def is_due(self, now_ms: int) -> bool:
        """Check if the word is due for review at the given time."""
        return self.next_review_at is not None and self.next_review_at <= now_ms

    def to_data(self) -> Dict[str, Any]:
        """Convert to serializable data for storage."""
        return {
            "word_id": self.word_id,
            "familiarity_score": self.familiarity_score,
            "last_seen_at": self.last_seen_at,
            "next_review_at": self.next_review_at,
            "is_favorite": self.is_favorite,
            "is_saved": self.is_saved,
            "collections": list(self.collections),
            "correct_count": self.correct_count,
            "incorrect_count": self.incorrect_count,
        }

    @classmethod
    def from_data(cls, data: Dict[str, Any], word_id: Optional[str] = None) -> "WordProgress":
        """Create a WordProgress instance from stored data."""
        return cls(
            word_id=str(data.get("word_id", word_id)),
            familiarity_score=int(data.get("familiarity_score") or 0),
            last_seen_at=data.get("last_seen_at"),
            next_review_at=data.get("next_review_at"),
            is_favorite=bool(data.get("is_favorite", False)),
            is_saved=bool(data.get("is_saved", False)),
            collections=list(data.get("collections") or []),
            correct_count=int(data.get("correct_count") or 0),
            incorrect_count=int(data.get("incorrect_count") or 0),
        )


@dataclass
class ActivityStats:
    """Aggregate activity counters and streak state."""
    total_read: int = 0
    total_favorited: int = 0
    total_saved: int = 0
    total_practices: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    last_active_date: Optional[str] = None  # YYYY-MM-DD, local time
    weekly_activity: List[bool] = field(default_factory=empty_week)  # index 0 = today

    def copy(self) -> "ActivityStats":
        """Return a detached snapshot."""
        return ActivityStats.from_data(self.to_data())

    def to_data(self) -> Dict[str, Any]:
        """Convert to serializable data for storage."""
        return {
            "total_read": self.total_read,
            "total_favorited": self.total_favorited,
            "total_saved": self.total_saved,
            "total_practices": self.total_practices,
            "current_streak": self.current_streak,
            "longest_streak": self.longest_streak,
            "last_active_date": self.last_active_date,
            "weekly_activity": list(self.weekly_activity),
        }

    @classmethod
    def from_data(cls, data: Dict[str, Any]) -> "ActivityStats":
        """Create an ActivityStats instance from stored data."""
        return cls(
            total_read=int(data.get("total_read") or 0),
            total_favorited=int(data.get("total_favorited") or 0),
            total_saved=int(data.get("total_saved") or 0),
            total_practices=int(data.get("total_practices") or 0),
            current_streak=int(data.get("current_streak") or 0),
            longest_streak=int(data.get("longest_streak") or 0),
            last_active_date=data.get("last_active_date"),
            weekly_activity=_normalize_week(data.get("weekly_activity")),
        )


@dataclass
class Collection:
    """User-defined group of words."""
    id: str
    name: str
    word_ids: List[str] = field(default_factory=list)
    created_at: int = 0  # ms since epoch

    def to_data(self) -> Dict[str, Any]:
        """Convert to serializable data for storage."""
        return {
            "id": self.id,
            "name": self.name,
            "word_ids": list(self.word_ids),
            "created_at": self.created_at,
        }

    @classmethod
    def from_data(cls, data: Dict[str, Any]) -> "Collection":
        """Create a Collection instance from stored data."""
        return cls(
            id=str(data["id"]),
            name=str(data.get("name", "")),
            word_ids=list(data.get("word_ids") or []),
            created_at=int(data.get("created_at") or 0),
        )


@dataclass
class GameResult:
    """Summary of a completed practice session."""
    game_type: GameType
    total_questions: int
    correct_answers: int
    incorrect_answers: int
    time_spent: float  # in seconds
    words_to_review: List[str] = field(default_factory=list)
    completed_at: int = 0  # ms since epoch

    def to_data(self) -> Dict[str, Any]:
        """Convert to serializable data for storage."""
        return {
            "game_type": self.game_type.value,
            "total_questions": self.total_questions,
            "correct_answers": self.correct_answers,
            "incorrect_answers": self.incorrect_answers,
            "time_spent": self.time_spent,
            "words_to_review": list(self.words_to_review),
            "completed_at": self.completed_at,
        }

    @classmethod
    def from_data(cls, data: Dict[str, Any]) -> "GameResult":
        """Create a GameResult instance from stored data."""
        return cls(
            game_type=GameType(data["game_type"]),
            total_questions=int(data.get("total_questions") or 0),
            correct_answers=int(data.get("correct_answers") or 0),
            incorrect_answers=int(data.get("incorrect_answers") or 0),
            time_spent=float(data.get("time_spent") or 0.0),
            words_to_review=list(data.get("words_to_review") or []),
            completed_at=int(data.get("completed_at") or 0),
        )


@dataclass
class UserProgress:
    """The whole per-installation progress record, persisted as one unit."""
    word_states: Dict[str, WordProgress] = field(default_factory=dict)
    stats: ActivityStats = field(default_factory=ActivityStats)
    collections: List[Collection] = field(default_factory=list)
    history: List[str] = field(default_factory=list)  # oldest first
    game_results: List[GameResult] = field(default_factory=list)

    def to_data(self) -> Dict[str, Any]:
        """Convert to serializable data for storage."""
        return {
            "word_states": {word_id: state.to_data() for word_id, state in self.word_states.items()},
            "stats": self.stats.to_data(),
            "collections": [collection.to_data() for collection in self.collections],
            "history": list(self.history),
            "game_results": [result.to_data() for result in self.game_results],
        }

    @classmethod
    def from_data(cls, data: Dict[str, Any]) -> "UserProgress":
        """Create a UserProgress instance from stored data."""
        word_states = {
            str(word_id): WordProgress.from_data(state, word_id)
            for word_id, state in (data.get("word_states") or {}).items()
        }
        return cls(
            word_states=word_states,
            stats=ActivityStats.from_data(data.get("stats") or {}),
            collections=[Collection.from_data(item) for item in data.get("collections") or []],
            history=[str(word_id) for word_id in data.get("history") or []],
            game_results=[GameResult.from_data(item) for item in data.get("game_results") or []],
        )
