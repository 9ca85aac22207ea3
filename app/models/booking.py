from datetime import UTC, datetime

from sqlmodel import Field, SQLModel


def _utc_naive_now() -> datetime:
    """Naive UTC for TIMESTAMP WITHOUT TIME ZONE columns."""
    return datetime.now(UTC).replace(tzinfo=None)


class Booking(SQLModel, table=True):
    __tablename__ = "bookings"
    id: int | None = Field(default=None, primary_key=True)
    prescriber_id: str = Field(index=True)
    date: str = Field(index=True)  # YYYY-MM-DD
    time: str  # h:mm AM/PM, start only
    reason: str | None = None
    created_at: datetime = Field(default_factory=_utc_naive_now)


class BookingCreate(SQLModel):
    prescriber_id: str
    date: str
    time: str
    reason: str | None = None


class BookingPublic(SQLModel):
    id: int
    prescriber_id: str
    date: str
    time: str
    reason: str | None = None
    created_at: datetime
