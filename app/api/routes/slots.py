import datetime as dt

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_booking_store
from app.api.routes.availability import load_availability
from app.api.schemas.availability import AvailableDatesResponse, AvailableTimesResponse
from app.core.config import settings
from app.services.booking_store import BookingStore
from app.services.slot_service import (
    day_name_for_date,
    time_slots_for_date,
    upcoming_dates,
    weekdays_with_availability,
)

router = APIRouter(prefix="/prescribers/{prescriber_id}/slots", tags=["slots"])


@router.get("/dates", response_model=AvailableDatesResponse)
async def available_dates(
    prescriber_id: str,
    horizon_days: int | None = Query(None, ge=0, le=366),
    store: BookingStore = Depends(get_booking_store),
) -> AvailableDatesResponse:
    """Upcoming dates (local wall clock) on which the prescriber has availability."""
    availability = await load_availability(store, prescriber_id)
    weekdays = weekdays_with_availability(availability)
    horizon = settings.availability_horizon_days if horizon_days is None else horizon_days
    return AvailableDatesResponse(
        prescriber_id=prescriber_id,
        has_availability=bool(weekdays),
        horizon_days=horizon,
        dates=upcoming_dates(weekdays, horizon_days=horizon),
    )


@router.get("/times", response_model=AvailableTimesResponse)
async def available_times(
    prescriber_id: str,
    date_param: dt.date = Query(..., alias="date"),
    store: BookingStore = Depends(get_booking_store),
) -> AvailableTimesResponse:
    """Bookable start times for one date, earliest first."""
    availability = await load_availability(store, prescriber_id)
    day = day_name_for_date(date_param)
    return AvailableTimesResponse(
        date=date_param.isoformat(),
        day=day,
        times=time_slots_for_date(availability, day, chronological=True),
    )
