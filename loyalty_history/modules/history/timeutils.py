"""Wall-clock stamping, query windows and pt-BR display rendering."""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional
from zoneinfo import ZoneInfo

from .models import DateWindow

STORE_FORMAT = "%Y-%m-%dT%H:%M:%S"
WINDOW_FORMAT = "%Y-%m-%d %H:%M:%S"
# pt-BR locale rendering: day/month/year, 24-hour clock.
DISPLAY_FORMAT = "%d/%m/%Y, %H:%M:%S"

EPOCH_FLOOR = datetime(1970, 1, 1, 0, 0, 0)
FAR_FUTURE_CEILING = datetime(2999, 12, 31, 23, 59, 59)
END_OF_DAY = time(23, 59, 59)


def local_now(timezone: str, now: Optional[datetime] = None) -> datetime:
    """Return the current wall-clock time in ``timezone`` as a naive datetime.

    Microseconds are dropped so stored values round-trip through
    ``STORE_FORMAT`` unchanged. ``now`` must be timezone-aware when given.
    """
    zone = ZoneInfo(timezone)
    moment = now.astimezone(zone) if now is not None else datetime.now(zone)
    return moment.replace(tzinfo=None, microsecond=0)


def format_store_timestamp(moment: datetime) -> str:
    return moment.strftime(STORE_FORMAT)


def resolve_window(start: Optional[date] = None, end: Optional[date] = None) -> DateWindow:
    window_start = datetime.combine(start, time.min) if start is not None else EPOCH_FLOOR
    window_end = datetime.combine(end, END_OF_DAY) if end is not None else FAR_FUTURE_CEILING
    return DateWindow(start=window_start, end=window_end)


def to_display(moment: datetime, store_timezone: str, display_timezone: str) -> str:
    """Render a stored naive timestamp in the display zone and format."""
    if store_timezone != display_timezone:
        moment = (
            moment.replace(tzinfo=ZoneInfo(store_timezone))
            .astimezone(ZoneInfo(display_timezone))
            .replace(tzinfo=None)
        )
    return moment.strftime(DISPLAY_FORMAT)


def parse_display(value: str) -> datetime:
    return datetime.strptime(value, DISPLAY_FORMAT)
