from datetime import UTC, datetime
from typing import Any

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


def _utc_naive_now() -> datetime:
    """Naive UTC for TIMESTAMP WITHOUT TIME ZONE columns."""
    return datetime.now(UTC).replace(tzinfo=None)


class PrescriberAvailability(SQLModel, table=True):
    __tablename__ = "prescriber_availability"
    id: int | None = Field(default=None, primary_key=True)
    prescriber_id: str = Field(unique=True, index=True)
    # Canonical [{day, startTime, endTime}, ...] exactly as sent on the wire
    availability: list[dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    updated_at: datetime = Field(default_factory=_utc_naive_now)


class CalendarDate(SQLModel):
    """A concrete bookable date projected from weekly availability."""

    date: str  # YYYY-MM-DD
    weekday: str
    day_of_month: int
    month_label: str  # e.g. "October 2026"
