"""Pydantic schemas used by the HTTP interface."""
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from loyalty_history.modules.history import HistoryEntry, HistoryKind

WIRE_KINDS: dict[HistoryKind, str] = {
    HistoryKind.POINT: "ponto",
    HistoryKind.TRANSACTION: "transacao",
}


def _falsy_as_missing(value: Any) -> Any:
    # Runs before number-to-str coercion, so 0 stays missing instead of "0".
    return value or None


class PointEventCreate(BaseModel):
    # Every field is optional here so that missing values reach the
    # recorder and are reported as 400, not as a schema error.
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    id: Optional[str] = None
    id_user: Optional[str] = Field(default=None, alias="idUser")
    points: Optional[Union[int, float]] = None

    check_ids = field_validator("id", "id_user", mode="before")(_falsy_as_missing)


class TransactionCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    id_user: Optional[str] = Field(default=None, alias="idUser")
    description: Optional[str] = None
    points: Optional[Union[int, float]] = None

    check_text = field_validator("id_user", "description", mode="before")(_falsy_as_missing)


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None


class HistoryEntryResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    id_user: str = Field(alias="idUser")
    points: Union[int, float]
    description: Optional[str] = None
    date: str = Field(..., description="Data no formato pt-BR (DD/MM/AAAA, HH:MM:SS)")
    tipo: Literal["ponto", "transacao"]

    @classmethod
    def from_entry(cls, entry: HistoryEntry) -> "HistoryEntryResponse":
        return cls(
            id=entry.id,
            id_user=entry.user_id,
            points=entry.points,
            description=entry.description,
            date=entry.date,
            tipo=WIRE_KINDS[entry.kind],
        )


class UserHistoryResponse(BaseModel):
    history: list[HistoryEntryResponse]


class GroupedHistoryResponse(BaseModel):
    history: dict[str, list[HistoryEntryResponse]]


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
