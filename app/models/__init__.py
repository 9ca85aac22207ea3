from app.models.availability import CalendarDate, PrescriberAvailability
from app.models.booking import Booking, BookingCreate, BookingPublic

__all__ = [
    "CalendarDate",
    "PrescriberAvailability",
    "Booking",
    "BookingCreate",
    "BookingPublic",
]
