from __future__ import annotations

from datetime import date, datetime, timezone

from loyalty_history.modules.history.timeutils import (
    EPOCH_FLOOR,
    FAR_FUTURE_CEILING,
    format_store_timestamp,
    local_now,
    parse_display,
    resolve_window,
    to_display,
)


def test_local_now_uses_sao_paulo_wall_clock_without_microseconds() -> None:
    moment = datetime(2024, 1, 15, 13, 0, 5, 987654, tzinfo=timezone.utc)

    result = local_now("America/Sao_Paulo", moment)

    assert result == datetime(2024, 1, 15, 10, 0, 5)
    assert result.tzinfo is None


def test_store_timestamp_has_seconds_precision_and_no_offset() -> None:
    assert format_store_timestamp(datetime(2024, 3, 7, 8, 9, 10)) == "2024-03-07T08:09:10"


def test_window_defaults_span_epoch_to_year_2999() -> None:
    window = resolve_window()

    assert window.start == EPOCH_FLOOR == datetime(1970, 1, 1, 0, 0, 0)
    assert window.end == FAR_FUTURE_CEILING == datetime(2999, 12, 31, 23, 59, 59)


def test_window_covers_whole_days_inclusively() -> None:
    window = resolve_window(date(2024, 5, 1), date(2024, 5, 31))

    assert window.start == datetime(2024, 5, 1, 0, 0, 0)
    assert window.end == datetime(2024, 5, 31, 23, 59, 59)
    assert datetime(2024, 5, 1, 0, 0, 0) in window
    assert datetime(2024, 5, 31, 23, 59, 59) in window
    assert datetime(2024, 4, 30, 23, 59, 59) not in window
    assert datetime(2024, 6, 1, 0, 0, 0) not in window


def test_display_format_is_pt_br_and_parses_back() -> None:
    stored = datetime(2024, 2, 3, 21, 4, 5)

    rendered = to_display(stored, "America/Sao_Paulo", "America/Sao_Paulo")

    assert rendered == "03/02/2024, 21:04:05"
    assert parse_display(rendered) == stored


def test_display_converts_between_zones() -> None:
    rendered = to_display(datetime(2024, 1, 15, 10, 0, 0), "America/Sao_Paulo", "UTC")

    assert rendered == "15/01/2024, 13:00:00"
