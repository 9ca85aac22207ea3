import logging
from collections.abc import Iterable
from datetime import date, datetime, timedelta
from typing import Any

from app.core.config import settings
from app.core.exceptions import AvailabilityValidationError
from app.models.availability import CalendarDate
from app.services.calendar_utils import (
    DAYS,
    canonical_day,
    format_time_12h,
    to_minutes,
    weekday_index_for,
)

logger = logging.getLogger(__name__)


def _window(slot: Any) -> tuple[int, int] | None:
    """(start, end) minutes for a slot the projection accepts; None for malformed or inverted slots."""
    if not isinstance(slot, dict):
        return None
    if canonical_day(slot.get("day")) is None:
        return None
    start = to_minutes(slot.get("startTime"))
    end = to_minutes(slot.get("endTime"))
    if start is None or end is None or start >= end:
        return None
    return start, end


def weekdays_with_availability(availability: Iterable[dict[str, Any]] | None) -> set[int]:
    """Weekday indices (0=Sunday..6=Saturday) that have at least one usable slot."""
    indices: set[int] = set()
    for slot in availability or []:
        if _window(slot) is None:
            continue
        indices.add(weekday_index_for(slot.get("day")))
    return indices


def _js_weekday(d: date) -> int:
    # date.weekday() is Monday=0; clients number Sunday=0
    return (d.weekday() + 1) % 7


def to_calendar_date(d: date) -> CalendarDate:
    return CalendarDate(
        date=d.isoformat(),
        weekday=DAYS[d.weekday()],
        day_of_month=d.day,
        month_label=d.strftime("%B %Y"),
    )


def upcoming_dates(
    weekday_indices: Iterable[int],
    horizon_days: int | None = None,
    reference_now: date | datetime | None = None,
) -> list[CalendarDate]:
    """
    Dates from today through today + horizon_days (both inclusive) falling on one of
    weekday_indices, ascending. Recomputed per call since "today" moves.
    """
    wanted = set(weekday_indices)
    if horizon_days is None:
        horizon_days = settings.availability_horizon_days
    if not wanted or horizon_days < 0:
        return []
    if reference_now is None:
        reference_now = datetime.now()
    start = reference_now.date() if isinstance(reference_now, datetime) else reference_now
    out: list[CalendarDate] = []
    for offset in range(horizon_days + 1):
        d = start + timedelta(days=offset)
        if _js_weekday(d) in wanted:
            out.append(to_calendar_date(d))
    return out


def time_slots_for_date(
    availability: Iterable[dict[str, Any]] | None,
    day_name: str,
    increment_minutes: int | None = None,
    chronological: bool = False,
) -> list[str]:
    """
    Bookable start times ("h:mm AM/PM") for one weekday.

    Each matching slot is walked from startTime in increment_minutes steps while the
    offset is strictly before endTime. Offsets shared by overlapping split shifts
    appear once. Output keeps first-occurrence order across slots as listed;
    pass chronological=True to sort before formatting.
    """
    if increment_minutes is None:
        increment_minutes = settings.slot_increment_minutes
    if increment_minutes <= 0:
        raise AvailabilityValidationError(
            "Slot increment must be a positive number of minutes.",
            details={"increment_minutes": increment_minutes},
        )
    target = canonical_day(day_name)
    if target is None:
        return []
    seen: set[int] = set()
    offsets: list[int] = []
    for slot in availability or []:
        if not isinstance(slot, dict) or canonical_day(slot.get("day")) != target:
            continue
        window = _window(slot)
        if window is None:
            logger.debug("Skipping unusable slot for %s: %r", target, slot)
            continue
        start, end = window
        for minute in range(start, end, increment_minutes):
            if minute not in seen:
                seen.add(minute)
                offsets.append(minute)
    if chronological:
        offsets.sort()
    return [format_time_12h(m) for m in offsets]


def day_name_for_date(value: date | datetime | CalendarDate | str) -> str:
    """Weekday name a date falls on; accepts date, datetime, CalendarDate or "YYYY-MM-DD"."""
    if isinstance(value, CalendarDate):
        value = value.date
    if isinstance(value, str):
        value = date.fromisoformat(value.strip())
    if isinstance(value, datetime):
        value = value.date()
    return DAYS[value.weekday()]
