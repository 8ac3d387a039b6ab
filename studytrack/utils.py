"""Utility functions for lenient timestamp and number handling."""

from __future__ import annotations

import math
from datetime import UTC, date, datetime, time
from typing import Any

_MS_PER_SECOND = 1000


def parse_instant(value: Any) -> datetime | None:
    """Parse a loosely-typed timestamp into an aware UTC datetime.

    Accepts:
    - ``datetime`` (naive values are taken as UTC)
    - ``date`` (midnight UTC)
    - ISO-8601 strings, including a trailing ``Z``
    - ``int``/``float`` epoch milliseconds

    Args:
        value: Raw value from a store payload or caller

    Returns:
        Aware UTC datetime, or None when the value is absent or unparsable
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, int | float):
        try:
            if not math.isfinite(value):
                return None
            parsed = datetime.fromtimestamp(value / _MS_PER_SECOND, tz=UTC)
        except (OverflowError, OSError, ValueError):
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith(("Z", "z")):
            text = f"{text[:-1]}+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    # Store payloads carry millisecond precision
    parsed = parsed.replace(microsecond=parsed.microsecond // 1000 * 1000)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    try:
        return parsed.astimezone(UTC)
    except OverflowError:
        # Offsets can push instants near year 1 or 9999 out of range
        return None


def to_iso(value: datetime | None) -> str | None:
    """Serialize an instant as ISO-8601 UTC with millisecond precision and ``Z``."""
    if value is None:
        return None
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def coerce_minutes(value: Any) -> int:
    """Coerce a tracked-minutes value to a non-negative integer.

    Non-numeric, non-finite and negative values become 0; everything else is
    rounded half away from zero, matching how the dashboard rounds input.
    """
    if isinstance(value, bool) or value is None:
        return 0
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    if not math.isfinite(number) or number < 0:
        return 0
    return math.floor(number + 0.5)
