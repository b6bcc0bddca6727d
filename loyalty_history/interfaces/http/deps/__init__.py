from .database import get_db_session
from .history import get_history_service

__all__ = [
    "get_db_session",
    "get_history_service",
]
