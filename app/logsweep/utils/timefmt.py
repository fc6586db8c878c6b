"""Timezone resolution and timestamp formatting for display.

The display timezone is always passed explicitly so output never depends
on process-wide locale or TZ state.
"""

import re
from datetime import UTC, datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

DATE_FORMAT = "%Y-%m-%d"

_OFFSET_RE = re.compile(r"^(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$")


def local_timezone() -> tzinfo:
    """Return the system's local timezone as a fixed offset."""
    local = datetime.now().astimezone().tzinfo
    return local if local is not None else UTC


def resolve_timezone(value: str | None) -> tzinfo:
    """Resolve a user-supplied timezone string.

    Accepted forms:
    - None: the system local timezone
    - "UTC" or "Z"
    - A fixed offset such as "+08:00", "-0530" or "+8"
    - An IANA zone name such as "Asia/Shanghai"

    Args:
        value: Timezone specification.

    Returns:
        Matching tzinfo instance.

    Raises:
        ValueError: If the value is not a recognised timezone.
    """
    if value is None:
        return local_timezone()

    text = value.strip()
    if text.upper() in ("UTC", "Z"):
        return UTC

    match = _OFFSET_RE.match(text)
    if match:
        hours = int(match.group("hours"))
        minutes = int(match.group("minutes") or 0)
        if hours > 23 or minutes > 59:
            msg = f"Timezone offset out of range: {value}"
            raise ValueError(msg)
        delta = timedelta(hours=hours, minutes=minutes)
        if match.group("sign") == "-":
            delta = -delta
        return timezone(delta)

    try:
        return ZoneInfo(text)
    except (ZoneInfoNotFoundError, ValueError) as e:
        msg = f"Unknown timezone: {value}"
        raise ValueError(msg) from e


def format_mtime(ts: datetime, tz: tzinfo, fmt: str = DATE_FORMAT) -> str:
    """Format a modification timestamp in the target timezone.

    Args:
        ts: Timezone-aware timestamp.
        tz: Timezone to render in.
        fmt: strftime format, defaults to YYYY-MM-DD.

    Returns:
        Formatted timestamp string.

    Raises:
        ValueError: If ts is naive.
    """
    if ts.tzinfo is None:
        msg = "Timestamp must be timezone-aware"
        raise ValueError(msg)
    return ts.astimezone(tz).strftime(fmt)
