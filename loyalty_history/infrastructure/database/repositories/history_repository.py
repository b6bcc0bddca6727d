"""SQLAlchemy repository for point events and transactions."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from loyalty_history.infrastructure.database.models import PointRecord, TransactionRecord, generate_uuid
from loyalty_history.modules.history.exceptions import StoreAccessError
from loyalty_history.modules.history.models import DateWindow, PointEvent, Points, Transaction

STORE_ERROR_MESSAGE = "Falha ao acessar o banco de dados."


def _as_points(value: float) -> Points:
    # Double columns hand back floats; whole values go back out as int.
    return int(value) if float(value).is_integer() else value


class SqlHistoryRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def insert_point_event(
        self,
        *,
        id: str,
        user_id: str,
        points: Points,
        occurred_at: datetime,
    ) -> None:
        await self._persist(
            PointRecord(id=id, user_id=user_id, points=points, occurred_at=occurred_at)
        )

    async def insert_transaction(
        self,
        *,
        user_id: str,
        description: str,
        points: Points,
        occurred_at: datetime,
    ) -> str:
        record = TransactionRecord(
            id=generate_uuid(),
            user_id=user_id,
            description=description,
            points=points,
            occurred_at=occurred_at,
        )
        await self._persist(record)
        return record.id

    async def query_point_events(self, *, user_id: Optional[str], window: DateWindow) -> list[PointEvent]:
        stmt = select(PointRecord).where(PointRecord.occurred_at.between(window.start, window.end))
        if user_id is not None:
            stmt = stmt.where(PointRecord.user_id == user_id)
        rows = await self._fetch(stmt)
        return [self._to_point_event(row) for row in rows]

    async def query_transactions(self, *, user_id: Optional[str], window: DateWindow) -> list[Transaction]:
        stmt = select(TransactionRecord).where(TransactionRecord.occurred_at.between(window.start, window.end))
        if user_id is not None:
            stmt = stmt.where(TransactionRecord.user_id == user_id)
        rows = await self._fetch(stmt)
        return [self._to_transaction(row) for row in rows]

    async def _persist(self, record: PointRecord | TransactionRecord) -> None:
        self._session.add(record)
        try:
            await self._session.commit()
        except SQLAlchemyError as exc:
            await self._session.rollback()
            raise StoreAccessError(STORE_ERROR_MESSAGE, details=str(exc)) from exc

    async def _fetch(self, stmt: Select) -> list:
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            await self._session.rollback()
            raise StoreAccessError(STORE_ERROR_MESSAGE, details=str(exc)) from exc
        return list(result.scalars().all())

    @staticmethod
    def _to_point_event(model: PointRecord) -> PointEvent:
        return PointEvent(
            id=model.id,
            user_id=model.user_id,
            points=_as_points(model.points),
            occurred_at=model.occurred_at,
        )

    @staticmethod
    def _to_transaction(model: TransactionRecord) -> Transaction:
        return Transaction(
            id=model.id,
            user_id=model.user_id,
            description=model.description,
            points=_as_points(model.points),
            occurred_at=model.occurred_at,
        )
