"""Relative, human-readable ages for token timestamps.

Every public function here is total: malformed or missing input
degrades to :data:`NOT_AVAILABLE` instead of raising.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from typing import Any

NOT_AVAILABLE: str = "n/a"
"""Rendered when a timestamp is missing or cannot be parsed."""

CREATED_AT_KEY: str = "createdAt"

_RFC3339 = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"[Tt](?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?:(?P<utc>[Zz])|(?P<sign>[+-])(?P<off_hour>\d{2}):(?P<off_minute>\d{2}))$"
)

# Largest first; a year is 365 days.
_UNITS: tuple[tuple[int, str], ...] = (
    (365 * 24 * 3600, "y"),
    (24 * 3600, "d"),
    (3600, "h"),
    (60, "m"),
)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_rfc3339(value: str) -> datetime | None:
    """Parse an RFC 3339 timestamp into an aware ``datetime``.

    Returns ``None`` when *value* is not a valid RFC 3339 instant.
    Fractional seconds beyond microsecond precision are truncated.
    """
    match = _RFC3339.match(value.strip())
    if match is None:
        return None

    fraction = match.group("fraction") or ""
    microsecond = int((fraction + "000000")[:6])

    try:
        if match.group("utc"):
            tz = timezone.utc
        else:
            offset = timedelta(
                hours=int(match.group("off_hour")),
                minutes=int(match.group("off_minute")),
            )
            if match.group("sign") == "-":
                offset = -offset
            tz = timezone(offset)
        return datetime(
            int(match.group("year")),
            int(match.group("month")),
            int(match.group("day")),
            int(match.group("hour")),
            int(match.group("minute")),
            int(match.group("second")),
            microsecond,
            tzinfo=tz,
        )
    except ValueError:
        # Out-of-range fields, e.g. month 13 or an offset of 24:00.
        return None


# ---------------------------------------------------------------------------
# Duration rendering
# ---------------------------------------------------------------------------

def human_duration(delta: timedelta) -> str:
    """Render *delta* as a coarse duration such as ``"2h"`` or ``"3d"``.

    The largest whole unit (s, m, h, d, y) is selected and the value
    truncated to it.  A delta up to one second in the future reads as
    ``"0s"`` to tolerate clock skew; anything further ahead is
    ``"<invalid>"``.
    """
    seconds = int(delta.total_seconds())
    if seconds < -1:
        return "<invalid>"
    if seconds < 0:
        return "0s"
    for unit_seconds, suffix in _UNITS:
        if seconds >= unit_seconds:
            return f"{seconds // unit_seconds}{suffix}"
    return f"{seconds}s"


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def humanize_timestamp(value: object, now: datetime | None = None) -> str:
    """Return the age of *value* relative to *now*, or ``"n/a"``.

    *value* is coerced with ``str()`` before parsing, so any object whose
    string form is an RFC 3339 instant is accepted.
    """
    if value is None:
        return NOT_AVAILABLE
    try:
        text = str(value)
    except Exception:  # noqa: BLE001
        return NOT_AVAILABLE
    parsed = parse_rfc3339(text)
    if parsed is None:
        return NOT_AVAILABLE
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return human_duration(now - parsed)


def humanize_created(meta: Mapping[str, Any], now: datetime | None = None) -> str:
    """Return the age of ``meta["createdAt"]``, or ``"n/a"`` when absent."""
    if CREATED_AT_KEY not in meta:
        return NOT_AVAILABLE
    return humanize_timestamp(meta[CREATED_AT_KEY], now)
