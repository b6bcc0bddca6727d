"""Endpoints recording point events and transactions and listing history."""
from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from loyalty_history.interfaces.http.deps import get_history_service
from loyalty_history.modules.history import HistoryService
from loyalty_history.schemas import (
    ErrorResponse,
    GroupedHistoryResponse,
    HistoryEntryResponse,
    MessageResponse,
    PointEventCreate,
    TransactionCreate,
    UserHistoryResponse,
)

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Campos obrigatórios ausentes"},
    500: {"model": ErrorResponse, "description": "Falha ao acessar o banco de dados"},
}

START_QUERY = Query(None, description="Data inicial (YYYY-MM-DD)")
END_QUERY = Query(None, description="Data final (YYYY-MM-DD)")


@router.post(
    "/pontos",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
    summary="Registra pontos após leitura do QR code",
)
async def record_points(
    payload: PointEventCreate,
    service: HistoryService = Depends(get_history_service),
) -> MessageResponse:
    await service.record_point_event(id=payload.id, user_id=payload.id_user, points=payload.points)
    return MessageResponse(message="Histórico de pontos registrado com sucesso.")


@router.post(
    "/transacoes",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
    summary="Registra uma transação de benefício",
)
async def record_transaction(
    payload: TransactionCreate,
    service: HistoryService = Depends(get_history_service),
) -> MessageResponse:
    await service.record_transaction(
        user_id=payload.id_user,
        description=payload.description,
        points=payload.points,
    )
    return MessageResponse(message="Histórico de transação registrado com sucesso.")


@router.get(
    "",
    response_model=GroupedHistoryResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
    summary="Retorna o histórico de todos os usuários agrupado por usuário",
)
async def all_users_history(
    start: Optional[date] = START_QUERY,
    end: Optional[date] = END_QUERY,
    service: HistoryService = Depends(get_history_service),
) -> GroupedHistoryResponse:
    grouped = await service.get_history(start=start, end=end)
    return GroupedHistoryResponse(
        history={
            user_id: [HistoryEntryResponse.from_entry(entry) for entry in entries]
            for user_id, entries in grouped.items()
        }
    )


@router.get(
    "/{id_user}",
    response_model=UserHistoryResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
    summary="Retorna o histórico de pontos e transações de um usuário",
)
async def user_history(
    id_user: str,
    start: Optional[date] = START_QUERY,
    end: Optional[date] = END_QUERY,
    service: HistoryService = Depends(get_history_service),
) -> UserHistoryResponse:
    entries = await service.get_history(user_id=id_user, start=start, end=end)
    return UserHistoryResponse(history=[HistoryEntryResponse.from_entry(entry) for entry in entries])
