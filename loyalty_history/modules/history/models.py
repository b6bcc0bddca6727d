"""Domain models for point events, transactions and their merged history."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Union


# JSON number: integral values stay int, fractional values are float.
Points = Union[int, float]


class HistoryKind(str, Enum):
    POINT = "point"
    TRANSACTION = "transaction"


@dataclass(slots=True, frozen=True)
class PointEvent:
    id: str
    user_id: str
    points: Points
    occurred_at: datetime


@dataclass(slots=True, frozen=True)
class Transaction:
    id: str
    user_id: str
    description: str
    points: Points
    occurred_at: datetime


@dataclass(slots=True, frozen=True)
class DateWindow:
    """Closed ``[start, end]`` interval of naive wall-clock timestamps."""

    start: datetime
    end: datetime

    def __contains__(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end


@dataclass(slots=True, frozen=True)
class HistoryEntry:
    kind: HistoryKind
    id: str
    user_id: str
    points: Points
    date: str
    description: Optional[str] = None

    @classmethod
    def from_point(cls, event: PointEvent, date: str) -> "HistoryEntry":
        return cls(
            kind=HistoryKind.POINT,
            id=event.id,
            user_id=event.user_id,
            points=event.points,
            date=date,
        )

    @classmethod
    def from_transaction(cls, transaction: Transaction, date: str) -> "HistoryEntry":
        return cls(
            kind=HistoryKind.TRANSACTION,
            id=transaction.id,
            user_id=transaction.user_id,
            points=transaction.points,
            date=date,
            description=transaction.description,
        )


HistoryResult = Union[list[HistoryEntry], dict[str, list[HistoryEntry]]]
