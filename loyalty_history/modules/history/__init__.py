"""Points and transactions history domain."""

from .exceptions import HistoryError, StoreAccessError, ValidationError
from .models import DateWindow, HistoryEntry, HistoryKind, HistoryResult, PointEvent, Points, Transaction
from .service import HistoryService

__all__ = [
    "DateWindow",
    "HistoryEntry",
    "HistoryError",
    "HistoryKind",
    "HistoryResult",
    "HistoryService",
    "PointEvent",
    "Points",
    "StoreAccessError",
    "Transaction",
    "ValidationError",
]
