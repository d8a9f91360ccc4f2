"""Database models for the progress store."""
from sqlalchemy import JSON, Column, String

from vocabprogress.models.base import Base, TimestampMixin


class ProgressSnapshot(Base, TimestampMixin):
    """Whole serialized user progress record, one row per store key."""

    __tablename__ = "progress_snapshots"

    key = Column(String, primary_key=True)
    payload = Column(JSON, nullable=False)
