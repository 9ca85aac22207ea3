from datetime import UTC, datetime
from typing import Any, Protocol

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.availability import PrescriberAvailability
from app.models.booking import Booking, BookingCreate


class BookingStore(Protocol):
    """Persistence collaborator for availability and bookings, injected into the API layer."""

    async def get_prescriber_availability(self, prescriber_id: str) -> list[dict[str, Any]] | None: ...

    async def save_prescriber_availability(
        self, prescriber_id: str, availability: list[dict[str, Any]]
    ) -> list[dict[str, Any]]: ...

    async def submit_booking(self, payload: BookingCreate) -> Booking: ...


class SqlBookingStore:
    """BookingStore over the SQLModel tables. No reservation/lock step: concurrent bookers are not guarded."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _get_row(self, prescriber_id: str) -> PrescriberAvailability | None:
        result = await self.session.execute(
            select(PrescriberAvailability).where(PrescriberAvailability.prescriber_id == prescriber_id)
        )
        return result.scalar_one_or_none()

    async def get_prescriber_availability(self, prescriber_id: str) -> list[dict[str, Any]] | None:
        row = await self._get_row(prescriber_id)
        if row is None:
            return None
        return list(row.availability or [])

    async def save_prescriber_availability(
        self, prescriber_id: str, availability: list[dict[str, Any]]
    ) -> list[dict[str, Any]]:
        row = await self._get_row(prescriber_id)
        if row is None:
            row = PrescriberAvailability(prescriber_id=prescriber_id, availability=availability)
            self.session.add(row)
        else:
            row.availability = availability
            row.updated_at = datetime.now(UTC).replace(tzinfo=None)
        await self.session.flush()
        return list(availability)

    async def submit_booking(self, payload: BookingCreate) -> Booking:
        booking = Booking(
            prescriber_id=payload.prescriber_id,
            date=payload.date,
            time=payload.time,
            reason=payload.reason,
        )
        self.session.add(booking)
        await self.session.flush()
        await self.session.refresh(booking)
        return booking
