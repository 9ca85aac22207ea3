import datetime as dt

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.services.calendar_utils import format_time_12h, parse_time_12h


class BookAppointmentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    prescriber_id: str = Field(alias="prescriberId", min_length=1)
    date: dt.date
    time: str
    reason: str | None = None

    @field_validator("time")
    @classmethod
    def _canonical_time(cls, v: str) -> str:
        minutes = parse_time_12h(v)
        if minutes is None:
            raise ValueError("time must look like '2:30 PM'")
        return format_time_12h(minutes)
