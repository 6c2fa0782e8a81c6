from __future__ import annotations

from datetime import datetime, timezone, tzinfo


def to_iso(moment: datetime) -> str:
    """Render *moment* as UTC ISO-8601 with millisecond precision and a Z suffix."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_timestamp(value: str, tz: tzinfo | None = None) -> str:
    """Short ``HH:MM`` display form of an ISO-8601 string.

    Empty input gives an empty string. Anything that cannot be parsed or
    shifted into *tz* (already formatted values such as ``"10:30"``, or
    instants at the edge of the representable range) is returned unchanged.
    Naive timestamps are read as local time. *tz* defaults to the local zone.
    """
    if not value:
        return ""
    try:
        return datetime.fromisoformat(value).astimezone(tz).strftime("%H:%M")
    except (TypeError, ValueError, OverflowError):
        return value
