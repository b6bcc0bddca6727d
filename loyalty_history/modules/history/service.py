"""Domain service recording history events and answering history queries."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from functools import partial
from typing import Any, Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from loyalty_history.core.config import Settings, get_settings

from .aggregation import group_by_user, merge_history
from .exceptions import StoreAccessError, ValidationError
from .models import HistoryResult, Points
from .repository import HistoryStore
from .timeutils import WINDOW_FORMAT, format_store_timestamp, local_now, resolve_window, to_display

logger = logging.getLogger(__name__)

OP_RECORD_POINTS = "hist.pontos"
OP_RECORD_TRANSACTION = "hist.transacoes"
OP_QUERY_HISTORY = "hist.consulta"


def _missing_fields(**fields: Any) -> tuple[str, ...]:
    # Falsy values (0, "", None) count as missing.
    return tuple(name for name, value in fields.items() if not value)


@dataclass(slots=True)
class HistoryService:
    store: HistoryStore
    timezone: str = "America/Sao_Paulo"
    display_timezone: Optional[str] = None
    clock: Optional[Callable[[], datetime]] = None

    @classmethod
    def with_session(cls, session: AsyncSession, settings: Settings | None = None) -> "HistoryService":
        # Deferred: the SQL repository imports this package.
        from loyalty_history.infrastructure.database.repositories.history_repository import SqlHistoryRepository

        settings = settings or get_settings()
        return cls(
            SqlHistoryRepository(session),
            timezone=settings.timezone,
            display_timezone=settings.display_timezone,
        )

    def now(self) -> datetime:
        if self.clock is not None:
            return self.clock()
        return local_now(self.timezone)

    async def record_point_event(self, *, id: str, user_id: str, points: Points) -> None:
        missing = _missing_fields(id=id, idUser=user_id, points=points)
        if missing:
            logger.warning(
                {
                    "message": "Campos obrigatórios ausentes ao registrar pontos",
                    "missing": list(missing),
                    "id": id,
                    "idUser": user_id,
                    "points": points,
                    "operation": OP_RECORD_POINTS,
                }
            )
            raise ValidationError()

        occurred_at = self.now()
        try:
            await self.store.insert_point_event(
                id=id,
                user_id=user_id,
                points=points,
                occurred_at=occurred_at,
            )
        except StoreAccessError as exc:
            logger.error(
                {
                    "message": "Erro ao registrar histórico de pontos",
                    "error": exc.details,
                    "id": id,
                    "idUser": user_id,
                    "operation": OP_RECORD_POINTS,
                },
                exc_info=True,
            )
            raise StoreAccessError("Erro ao registrar histórico de pontos.", details=exc.details) from exc

        logger.info(
            {
                "message": "Histórico de pontos registrado",
                "id": id,
                "idUser": user_id,
                "points": points,
                "date": format_store_timestamp(occurred_at),
                "operation": OP_RECORD_POINTS,
            }
        )

    async def record_transaction(self, *, user_id: str, description: str, points: Points) -> str:
        missing = _missing_fields(idUser=user_id, description=description, points=points)
        if missing:
            logger.warning(
                {
                    "message": "Campos obrigatórios ausentes ao registrar transação",
                    "missing": list(missing),
                    "idUser": user_id,
                    "description": description,
                    "points": points,
                    "operation": OP_RECORD_TRANSACTION,
                }
            )
            raise ValidationError()

        occurred_at = self.now()
        try:
            transaction_id = await self.store.insert_transaction(
                user_id=user_id,
                description=description,
                points=points,
                occurred_at=occurred_at,
            )
        except StoreAccessError as exc:
            logger.error(
                {
                    "message": "Erro ao registrar transação",
                    "error": exc.details,
                    "idUser": user_id,
                    "operation": OP_RECORD_TRANSACTION,
                },
                exc_info=True,
            )
            raise StoreAccessError("Erro ao registrar transação.", details=exc.details) from exc

        logger.info(
            {
                "message": "Histórico de transação registrado",
                "id": transaction_id,
                "idUser": user_id,
                "description": description,
                "points": points,
                "date": format_store_timestamp(occurred_at),
                "operation": OP_RECORD_TRANSACTION,
            }
        )
        return transaction_id

    async def get_history(
        self,
        *,
        user_id: Optional[str] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> HistoryResult:
        """Return the merged history for one user, or for everyone grouped by user."""
        user_id = user_id or None
        window = resolve_window(start, end)
        try:
            points = await self.store.query_point_events(user_id=user_id, window=window)
            transactions = await self.store.query_transactions(user_id=user_id, window=window)
        except StoreAccessError as exc:
            logger.error(
                {
                    "message": "Erro ao buscar histórico",
                    "error": exc.details,
                    "idUser": user_id or "todos",
                    "operation": OP_QUERY_HISTORY,
                },
                exc_info=True,
            )
            raise StoreAccessError("Erro ao buscar histórico.", details=exc.details) from exc

        render = partial(
            to_display,
            store_timezone=self.timezone,
            display_timezone=self.display_timezone or self.timezone,
        )
        history = merge_history(points, transactions, render)
        result: HistoryResult = history if user_id else group_by_user(history)

        logger.info(
            {
                "message": "Histórico consultado",
                "idUser": user_id or "todos",
                "startDateTime": window.start.strftime(WINDOW_FORMAT),
                "endDateTime": window.end.strftime(WINDOW_FORMAT),
                "quantidade": len(history),
                "operation": OP_QUERY_HISTORY,
            }
        )
        return result
