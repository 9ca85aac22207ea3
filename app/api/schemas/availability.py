from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.models.availability import CalendarDate


class AvailabilitySlotSchema(BaseModel):
    """One recurring weekly slot, serialized as {day, startTime, endTime}."""

    model_config = ConfigDict(populate_by_name=True)

    day: str
    start_time: str = Field(alias="startTime")
    end_time: str = Field(alias="endTime")


class AvailabilityPayload(BaseModel):
    # Raw editor input: partial records or legacy weekday names; checked on submission
    availability: list[dict[str, Any] | str] = Field(default_factory=list)


class AvailabilityResponse(BaseModel):
    availability: list[AvailabilitySlotSchema]


class AvailableDatesResponse(BaseModel):
    prescriber_id: str
    has_availability: bool  # False means "no availability set", not "fully booked"
    horizon_days: int
    dates: list[CalendarDate]


class AvailableTimesResponse(BaseModel):
    date: str  # YYYY-MM-DD
    day: str
    times: list[str]  # h:mm AM/PM, empty when the prescriber has no slots that weekday
