"""Helper utility functions."""

import math
import uuid
from datetime import datetime, timezone
from typing import Any, Optional


def generate_short_id() -> str:
    """Generate a short, URL-safe identifier for a new record."""
    return uuid.uuid4().hex[:10]


def utc_now() -> datetime:
    """Current time as a naive UTC datetime, the form dates are stored in."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def parse_date(value: Any) -> Optional[datetime]:
    """Parse a date or date-time string into a naive UTC datetime.

    Accepts ISO-8601 dates (``2024-01-01``) and date-times, with or without
    an offset; a trailing ``Z`` is read as UTC. Returns None when the value
    is missing or does not name a valid calendar date.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def parse_limit(value: Any) -> Optional[float]:
    """Parse a numeric limit; blank, non-numeric and non-finite values yield None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        if not value.strip():
            return None
        try:
            number = float(value)
        except ValueError:
            return None
    elif isinstance(value, (int, float)):
        number = float(value)
    else:
        return None

    if not math.isfinite(number):
        return None
    return number


def isoformat_date(value: datetime) -> str:
    """Render a stored naive UTC datetime as an ISO-8601 string with ``Z``."""
    return value.isoformat(timespec="milliseconds") + "Z"
