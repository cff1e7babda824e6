from __future__ import annotations

from datetime import date, datetime, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo


def resolve_timezone(name: Optional[str]) -> Optional[tzinfo]:
    """Map a configured IANA name to a tzinfo.

    Empty names mean "host local time" and resolve to None.
    """
    if not name or not name.strip():
        return None
    return ZoneInfo(name.strip())


def now_local(tz: Optional[tzinfo] = None) -> datetime:
    """Current aware time in `tz` (host local time when None).

    Note: Wrapped so tests can patch/mock easier.
    """
    if tz is None:
        return datetime.now().astimezone()
    return datetime.now(tz)


def to_local(moment: datetime, tz: Optional[tzinfo] = None) -> datetime:
    if moment.tzinfo is None:
        moment = moment.astimezone()
    return moment.astimezone(tz) if tz is not None else moment.astimezone()


def format_iso_timestamp(moment: datetime) -> str:
    """UTC ISO-8601 with milliseconds and a Z suffix, e.g. 2024-01-01T09:30:00.000Z."""
    utc = to_local(moment, timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def parse_iso_timestamp(value: str) -> datetime:
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def epoch_millis(moment: datetime) -> int:
    return int(to_local(moment, timezone.utc).timestamp() * 1000)


def format_display_date(day: date) -> str:
    """M/D/YYYY without zero padding, e.g. 1/1/2024."""
    return f"{day.month}/{day.day}/{day.year}"


def format_display_time(moment: datetime) -> str:
    """12-hour clock time of day, e.g. 9:05:03 AM."""
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d}:{moment.second:02d} {suffix}"
