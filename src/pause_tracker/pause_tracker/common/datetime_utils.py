from __future__ import annotations

from datetime import datetime, timedelta, timezone

_MS = timedelta(milliseconds=1)


def now_utc() -> datetime:
    """Current UTC time truncated to milliseconds.

    Note: Wrapped so tests can patch/mocked easier.
    """
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def to_iso(value: datetime) -> str:
    """Format as ISO-8601 UTC with millisecond precision, e.g. 2025-01-01T09:00:00.000Z."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def parse_iso(value: str) -> datetime:
    """Parse an ISO-8601 timestamp; naive values are taken as UTC."""
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def elapsed_milliseconds(start: datetime, end: datetime) -> int:
    return (end - start) // _MS


def round_minutes(milliseconds: int) -> int:
    """Round milliseconds to whole minutes, halves rounding up."""
    return (milliseconds + 30_000) // 60_000
