"""Date/time parsing for challenge timestamps returned by siteverify endpoints."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional


def parse_datetime(value: Any) -> Optional[datetime]:
    """Parse an ISO 8601 timestamp into a timezone-aware UTC datetime.

    Accepts:
    - ``None`` or ``""`` → ``None``
    - ``str`` ending in ``"Z"`` → converted to ``+00:00`` before parsing
      (Turnstile sends ``2022-02-28T15:14:30.096Z``)
    - Any other ISO 8601 string (``datetime.fromisoformat``), e.g. the
      ``yyyy-MM-ddTHH:mm:ssZZ`` form reCAPTCHA documents

    Naive datetimes (no ``tzinfo``) are assumed to be UTC.

    Returns:
        A timezone-aware ``datetime`` in UTC, or ``None`` if *value* is empty
        or cannot be parsed.
    """
    if value is None or value == "":
        return None
    try:
        raw = str(value)
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        dt = datetime.fromisoformat(raw)
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        return None
