"""SQLAlchemy-backed repository implementations."""

from .history_repository import SqlHistoryRepository

__all__ = ["SqlHistoryRepository"]
