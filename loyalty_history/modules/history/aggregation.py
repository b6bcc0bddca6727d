"""Merge, sort and group point events and transactions into one history."""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Iterable

from .models import HistoryEntry, PointEvent, Transaction
from .timeutils import parse_display

Renderer = Callable[[datetime], str]


def merge_history(
    points: Iterable[PointEvent],
    transactions: Iterable[Transaction],
    render: Renderer,
) -> list[HistoryEntry]:
    """Return both streams as display entries, most recent first.

    Entries are ordered by their rendered display string parsed back into a
    timestamp. The sort is stable, so entries sharing a second keep the
    concatenation order (points before transactions).
    """
    entries = [HistoryEntry.from_point(event, render(event.occurred_at)) for event in points]
    entries.extend(
        HistoryEntry.from_transaction(transaction, render(transaction.occurred_at))
        for transaction in transactions
    )
    return sorted(entries, key=lambda entry: parse_display(entry.date), reverse=True)


def group_by_user(entries: Iterable[HistoryEntry]) -> dict[str, list[HistoryEntry]]:
    grouped: dict[str, list[HistoryEntry]] = {}
    for entry in entries:
        grouped.setdefault(entry.user_id, []).append(entry)
    return grouped
