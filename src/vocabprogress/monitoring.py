"""Monitoring configuration for the progress core."""
from prometheus_client import Counter, Gauge, start_http_server

# Review metrics
review_outcomes = Counter(
    "vocabprogress_review_outcomes_total",
    "Total number of review outcomes recorded",
    ["outcome"],
)

words_seen = Counter(
    "vocabprogress_words_seen_total",
    "Total number of word views recorded",
)

# Streak metrics
current_streak = Gauge(
    "vocabprogress_current_streak_days",
    "Current streak of consecutive active days",
)

practice_sessions = Counter(
    "vocabprogress_practice_sessions_total",
    "Total number of completed practice sessions",
)

# Store metrics
store_writes = Counter(
    "vocabprogress_store_writes_total",
    "Total number of successful progress store writes",
)

store_write_failures = Counter(
    "vocabprogress_store_write_failures_total",
    "Total number of failed progress store writes",
    ["error_type"],
)


def start_monitoring(port: int = 9090) -> None:
    """Start the Prometheus metrics server."""
    start_http_server(port)
