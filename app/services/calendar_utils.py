"""Weekday names and wall-clock time helpers shared by the editor and the booking projection."""
import re

DAYS: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

# 0=Sunday .. 6=Saturday, matching what clients use for date pickers
WEEKDAY_INDEX: dict[str, int] = {
    "Sunday": 0,
    "Monday": 1,
    "Tuesday": 2,
    "Wednesday": 3,
    "Thursday": 4,
    "Friday": 5,
    "Saturday": 6,
}

_DAY_LOOKUP = {d.lower(): d for d in DAYS}
_HHMM = re.compile(r"^(\d{1,2}):(\d{2})$")
_H12 = re.compile(r"^(\d{1,2}):(\d{2})\s*([AaPp][Mm])$")


def canonical_day(day: object) -> str | None:
    """Canonical weekday name for a case-insensitive input, or None if unrecognized."""
    if not isinstance(day, str):
        return None
    return _DAY_LOOKUP.get(day.strip().lower())


def same_day(a: object, b: object) -> bool:
    ca, cb = canonical_day(a), canonical_day(b)
    if ca is not None or cb is not None:
        return ca == cb
    return a == b


def weekday_index_for(day: object) -> int | None:
    name = canonical_day(day)
    return WEEKDAY_INDEX[name] if name else None


def to_minutes(value: object) -> int | None:
    """Minutes since midnight for an "HH:MM" string; None if it is not a valid time of day."""
    if not isinstance(value, str):
        return None
    m = _HHMM.match(value.strip())
    if not m:
        return None
    hour, minute = int(m.group(1)), int(m.group(2))
    if hour > 23 or minute > 59:
        return None
    return hour * 60 + minute


def to_hhmm(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def format_time_12h(minutes: int) -> str:
    """Convert minutes since midnight to "h:mm AM/PM" (no leading zero on the hour)."""
    hour, minute = divmod(minutes % (24 * 60), 60)
    period = "AM" if hour < 12 else "PM"
    hour_12 = hour if hour <= 12 else hour - 12
    hour_12 = 12 if hour_12 == 0 else hour_12
    return f"{hour_12}:{minute:02d} {period}"


def parse_time_12h(value: object) -> int | None:
    """Inverse of format_time_12h. Accepts a leading zero ("09:30 AM") as older clients send it."""
    if not isinstance(value, str):
        return None
    m = _H12.match(value.strip())
    if not m:
        return None
    hour, minute, period = int(m.group(1)), int(m.group(2)), m.group(3).upper()
    if not 1 <= hour <= 12 or minute > 59:
        return None
    if hour == 12:
        hour = 0
    if period == "PM":
        hour += 12
    return hour * 60 + minute
