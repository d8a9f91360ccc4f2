"""Configuration settings for the progress core."""
import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
env_file = ".env.test" if os.getenv("ENV") == "test" else ".env"
load_dotenv(env_file)

# Learning settings
REPETITION_INTERVALS = [1, 3, 7, 14, 30, 60, 120]  # days between reviews, indexed by familiarity
MAX_FAMILIARITY = 6
HISTORY_LIMIT = 100
GAME_RESULTS_LIMIT = 50


def get_repetition_intervals() -> list[int]:
    """Get repetition intervals from environment variable."""
    raw = os.getenv("REPETITION_INTERVALS", "")
    if not raw:
        return list(REPETITION_INTERVALS)
    return [int(days) for days in raw.split(",") if days.strip()]


@dataclass
class DatabaseSettings:
    """Database configuration settings."""
    url: str = field(default_factory=lambda: os.getenv("DATABASE_URL", "sqlite:///vocabprogress.db"))
    echo: bool = field(default_factory=lambda: os.getenv("DATABASE_ECHO", "false").lower() == "true")


@dataclass
class LoggingSettings:
    """Logging configuration settings."""
    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE"))


@dataclass
class LearningSettings:
    """Spaced repetition and history settings."""
    repetition_intervals: list[int] = field(default_factory=get_repetition_intervals)
    max_familiarity: int = field(default_factory=lambda: int(os.getenv("MAX_FAMILIARITY", str(MAX_FAMILIARITY))))
    history_limit: int = field(default_factory=lambda: int(os.getenv("HISTORY_LIMIT", str(HISTORY_LIMIT))))
    game_results_limit: int = field(
        default_factory=lambda: int(os.getenv("GAME_RESULTS_LIMIT", str(GAME_RESULTS_LIMIT)))
    )


@dataclass
class StoreSettings:
    """User progress store settings."""
    store_key: str = field(default_factory=lambda: os.getenv("STORE_KEY", "vocab-user-store"))


@dataclass
class MonitoringSettings:
    """Prometheus exporter settings."""
    port: Optional[int] = field(
        default_factory=lambda: int(os.environ["MONITORING_PORT"]) if os.getenv("MONITORING_PORT") else None
    )


def get_database_settings() -> DatabaseSettings:
    """Get database settings."""
    return DatabaseSettings()


def get_logging_settings() -> LoggingSettings:
    """Get logging settings."""
    return LoggingSettings()


def get_learning_settings() -> LearningSettings:
    """Get learning settings."""
    return LearningSettings()


def get_store_settings() -> StoreSettings:
    """Get store settings."""
    return StoreSettings()


def get_monitoring_settings() -> MonitoringSettings:
    """Get monitoring settings."""
    return MonitoringSettings()


@dataclass
class Settings:
    """Main settings class that combines all configuration settings."""
    database: DatabaseSettings = field(default_factory=get_database_settings)
    logging: LoggingSettings = field(default_factory=get_logging_settings)
    learning: LearningSettings = field(default_factory=get_learning_settings)
    store: StoreSettings = field(default_factory=get_store_settings)
    monitoring: MonitoringSettings = field(default_factory=get_monitoring_settings)

    def validate(self) -> None:
        """Validate settings and raise ValueError if invalid."""
        intervals = self.learning.repetition_intervals
        if not intervals:
            raise ValueError("REPETITION_INTERVALS must not be empty")

        if any(days <= 0 for days in intervals):
            raise ValueError("REPETITION_INTERVALS must be positive")

        if any(later < earlier for earlier, later in zip(intervals, intervals[1:])):
            raise ValueError("REPETITION_INTERVALS must be non-decreasing")

        if self.learning.max_familiarity < 0:
            raise ValueError("MAX_FAMILIARITY cannot be negative")

        if self.learning.history_limit < 1:
            raise ValueError("HISTORY_LIMIT must be positive")

        if self.learning.game_results_limit < 1:
            raise ValueError("GAME_RESULTS_LIMIT must be positive")

        if not self.store.store_key:
            raise ValueError("STORE_KEY is required")


# Create global settings instance
settings = Settings()
settings.validate()
