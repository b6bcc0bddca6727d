"""Dependencies wiring the history service per request."""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from loyalty_history.core.config import Settings, get_settings
from loyalty_history.modules.history import HistoryService

from .database import get_db_session


def get_history_service(
    db: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
) -> HistoryService:
    return HistoryService.with_session(db, settings)


__all__ = ["get_history_service"]
