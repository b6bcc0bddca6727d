"""Repository protocol for the append-only history store."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .models import DateWindow, Points, PointEvent, Transaction


class HistoryStore(Protocol):
    async def insert_point_event(
        self,
        *,
        id: str,
        user_id: str,
        points: Points,
        occurred_at: datetime,
    ) -> None:
        ...

    async def insert_transaction(
        self,
        *,
        user_id: str,
        description: str,
        points: Points,
        occurred_at: datetime,
    ) -> str:
        ...

    async def query_point_events(self, *, user_id: Optional[str], window: DateWindow) -> Sequence[PointEvent]:
        ...

    async def query_transactions(self, *, user_id: Optional[str], window: DateWindow) -> Sequence[Transaction]:
        ...
