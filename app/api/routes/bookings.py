import logging

from fastapi import APIRouter, Depends, status

from app.api.deps import get_booking_store
from app.api.schemas.booking import BookAppointmentRequest
from app.models.booking import Booking, BookingCreate, BookingPublic
from app.services.booking_store import BookingStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/bookings", tags=["bookings"])


def _to_public(b: Booking) -> BookingPublic:
    return BookingPublic(
        id=int(b.id) if b.id is not None else 0,
        prescriber_id=b.prescriber_id,
        date=b.date,
        time=b.time,
        reason=b.reason,
        created_at=b.created_at,
    )


@router.post("", response_model=BookingPublic, status_code=status.HTTP_201_CREATED)
async def book_appointment(
    body: BookAppointmentRequest,
    store: BookingStore = Depends(get_booking_store),
) -> BookingPublic:
    # The chosen date/time is not re-checked against current availability here.
    data = BookingCreate(
        prescriber_id=body.prescriber_id,
        date=body.date.isoformat(),
        time=body.time,
        reason=body.reason,
    )
    booking = await store.submit_booking(data)
    logger.info("Booked %s %s with prescriber %s", booking.date, booking.time, booking.prescriber_id)
    return _to_public(booking)
