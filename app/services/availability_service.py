"""
Prescriber weekly availability: normalization and the editor operations.

Every function takes a WeeklyAvailability (list of {day, startTime, endTime} dicts)
and returns a new list; inputs are never mutated. Shape problems never raise here,
only the explicit submission path (prepare_for_submission) does.
"""
import logging
from collections.abc import Iterable
from typing import Any

from app.core.config import settings
from app.core.exceptions import AvailabilityValidationError
from app.services.calendar_utils import DAYS, canonical_day, same_day, to_hhmm, to_minutes

logger = logging.getLogger(__name__)

PRESETS: dict[str, tuple[str, ...]] = {
    "weekdays": DAYS[:5],
    "weekends": DAYS[5:],
    "all": DAYS,
}

TIME_FIELDS = ("startTime", "endTime")

Slot = dict[str, str]


def _default_slot(day: str) -> Slot:
    return {
        "day": canonical_day(day) or day,
        "startTime": settings.default_start_time,
        "endTime": settings.default_end_time,
    }


def _copy(current: Iterable[Slot] | None) -> list[Slot]:
    return [dict(s) for s in (current or [])]


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value.strip() if isinstance(value, str) else str(value)


def normalize(raw: Any) -> list[Slot]:
    """
    Best-effort canonicalization of raw availability from the editor or the API.

    Records get default times when startTime/endTime are missing or empty; the day is
    kept as given ("" when missing) and an unrecognized day stays inert. Plain strings
    are the legacy list-of-weekday-names shape and become one default slot each.
    """
    if not raw or isinstance(raw, (str, bytes, dict)):
        return []
    out: list[Slot] = []
    for item in raw:
        if isinstance(item, str):
            out.append(_default_slot(item.strip()))
        elif isinstance(item, dict):
            out.append(
                {
                    "day": _text(item.get("day")),
                    "startTime": _text(item.get("startTime")) or settings.default_start_time,
                    "endTime": _text(item.get("endTime")) or settings.default_end_time,
                }
            )
        else:
            logger.debug("Dropping unsupported availability entry: %r", item)
    return out


def slots_for_day(current: Iterable[Slot], day: str) -> list[Slot]:
    return [s for s in current if same_day(s.get("day"), day)]


def _global_index(current: list[Slot], day: str, index: int) -> int:
    """Position in the full list of the index-th slot belonging to day; -1 if none."""
    if index < 0:
        return -1
    count = 0
    for i, s in enumerate(current):
        if not same_day(s.get("day"), day):
            continue
        if count == index:
            return i
        count += 1
    return -1


def toggle_day(current: Iterable[Slot], day: str) -> list[Slot]:
    """Add one default slot if the day is empty, otherwise clear every slot of that day."""
    slots = _copy(current)
    if slots_for_day(slots, day):
        return [s for s in slots if not same_day(s.get("day"), day)]
    slots.append(_default_slot(day))
    return slots


def add_slot(current: Iterable[Slot], day: str) -> list[Slot]:
    # Identical slots are allowed while editing; dedupe_slots runs on submission.
    slots = _copy(current)
    slots.append(_default_slot(day))
    return slots


def remove_slot(current: Iterable[Slot], day: str, index: int) -> list[Slot]:
    slots = _copy(current)
    i = _global_index(slots, day, index)
    if i < 0:
        return slots
    del slots[i]
    return slots


def update_slot_time(current: Iterable[Slot], day: str, index: int, field: str, value: str) -> list[Slot]:
    """
    Set startTime or endTime of the index-th slot of day.

    No ordering check: start and end are edited independently, so an inverted range
    is legal in the working copy until it is submitted.
    """
    slots = _copy(current)
    if field not in TIME_FIELDS:
        logger.debug("Ignoring update of unknown slot field %r", field)
        return slots
    i = _global_index(slots, day, index)
    if i < 0:
        return slots
    slots[i][field] = value
    return slots


def apply_preset(preset: str) -> list[Slot]:
    """Fresh availability with one default slot per day of the preset; replaces everything."""
    days = PRESETS.get(preset)
    if days is None:
        raise AvailabilityValidationError(
            f"Unknown availability preset: {preset}",
            details={"preset": preset, "allowed": sorted(PRESETS)},
        )
    return [_default_slot(d) for d in days]


def slots_by_day(current: Iterable[Slot]) -> dict[str, list[Slot]]:
    slots = list(current)
    return {d: [dict(s) for s in slots if same_day(s.get("day"), d)] for d in DAYS}


def selected_days(current: Iterable[Slot]) -> list[str]:
    """Recognized days with at least one slot, Monday first."""
    grouped = slots_by_day(current)
    return [d for d in DAYS if grouped[d]]


def dedupe_slots(current: Iterable[Slot]) -> list[Slot]:
    seen: set[tuple[str, str, str]] = set()
    out: list[Slot] = []
    for s in current:
        key = (canonical_day(s.get("day")) or s.get("day", ""), s.get("startTime", ""), s.get("endTime", ""))
        if key in seen:
            continue
        seen.add(key)
        out.append(dict(s))
    return out


def slot_errors(slot: Slot) -> list[str]:
    errors: list[str] = []
    if canonical_day(slot.get("day")) is None:
        errors.append("unrecognized day")
    start = to_minutes(slot.get("startTime"))
    end = to_minutes(slot.get("endTime"))
    if start is None:
        errors.append("startTime must be HH:MM")
    if end is None:
        errors.append("endTime must be HH:MM")
    if start is not None and end is not None and start >= end:
        errors.append("startTime must be before endTime")
    return errors


def validate_availability(current: Iterable[Slot]) -> None:
    """Raise AvailabilityValidationError listing every invalid slot."""
    invalid = []
    for i, s in enumerate(current):
        errors = slot_errors(s)
        if errors:
            invalid.append({"index": i, "slot": dict(s), "errors": errors})
    if invalid:
        logger.debug("Availability rejected: %d invalid slot(s)", len(invalid))
        raise AvailabilityValidationError(
            "Each time slot needs a valid day and a start time before its end time.",
            details={"slots": invalid},
        )


def prepare_for_submission(raw: Any) -> list[Slot]:
    """Normalize, validate and dedupe; returns the exact list persisted upstream."""
    slots = normalize(raw)
    validate_availability(slots)
    canonical = [
        {
            "day": canonical_day(s["day"]),
            "startTime": to_hhmm(to_minutes(s["startTime"])),
            "endTime": to_hhmm(to_minutes(s["endTime"])),
        }
        for s in slots
    ]
    return dedupe_slots(canonical)


def availability_from_profile(profile: dict[str, Any] | None) -> list[Slot]:
    """
    Map a prescriber record from the API onto canonical WeeklyAvailability.

    Accepts `availability` with camelCase or snake_case time keys, falling back to the
    legacy `availableDays` / `available_days` list of weekday names.
    """
    if not profile:
        return []
    raw = profile.get("availability")
    if raw:
        if isinstance(raw, list):
            raw = [
                {
                    "day": r.get("day"),
                    "startTime": r.get("startTime") or r.get("start_time"),
                    "endTime": r.get("endTime") or r.get("end_time"),
                }
                if isinstance(r, dict)
                else r
                for r in raw
            ]
        return normalize(raw)
    return normalize(profile.get("availableDays") or profile.get("available_days"))
