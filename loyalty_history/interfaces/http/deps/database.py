"""Database session dependency."""

from __future__ import annotations

from loyalty_history.infrastructure.database import get_session as get_db_session

__all__ = ["get_db_session"]
