from __future__ import annotations

from datetime import date, datetime, tzinfo
from typing import Any, Optional

from ..core.exceptions import ValidationError

# None means the server's local zone.
LOCAL_TZ: Optional[tzinfo] = None


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_client_date(value: Any, *, default: Optional[date] = None, tz: Optional[tzinfo] = None) -> date:
    """Accept either ``YYYY-MM-DD`` or a JSON-serialised JS ``Date``.

    Browsers send ``new Date()`` in UTC (``2025-03-01T09:15:00.000Z``). Timestamps
    with an offset are moved to ``tz`` (default ``LOCAL_TZ``, the server's zone
    unless set) before the calendar day is taken.
    """

    if value is None or (isinstance(value, str) and not value.strip()):
        if default is None:
            raise ValidationError("Date is required")
        return default

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(tz if tz is not None else LOCAL_TZ)
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    try:
        if len(text) == 10:
            return parse_iso_date(text)
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise ValidationError("Date is not valid")
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(tz if tz is not None else LOCAL_TZ)
    return parsed.date()


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()
