import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_booking_store
from app.main import app
from app.models.booking import Booking, BookingCreate


class InMemoryBookingStore:
    """BookingStore kept in dicts so API tests never touch a database."""

    def __init__(self) -> None:
        self.availability: dict[str, list[dict]] = {}
        self.bookings: list[Booking] = []

    async def get_prescriber_availability(self, prescriber_id: str) -> list[dict] | None:
        stored = self.availability.get(prescriber_id)
        return None if stored is None else list(stored)

    async def save_prescriber_availability(self, prescriber_id: str, availability: list[dict]) -> list[dict]:
        self.availability[prescriber_id] = [dict(s) for s in availability]
        return list(availability)

    async def submit_booking(self, payload: BookingCreate) -> Booking:
        booking = Booking(id=len(self.bookings) + 1, **payload.model_dump())
        self.bookings.append(booking)
        return booking


@pytest.fixture
def store():
    return InMemoryBookingStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_booking_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def monday_only():
    return [{"day": "Monday", "startTime": "09:00", "endTime": "10:00"}]
