import logging

from fastapi import APIRouter, Depends

from app.api.deps import get_booking_store
from app.api.schemas.availability import AvailabilityPayload, AvailabilityResponse
from app.core.exceptions import NotFoundError
from app.services.availability_service import apply_preset, normalize, prepare_for_submission
from app.services.booking_store import BookingStore

logger = logging.getLogger(__name__)
router = APIRouter(tags=["availability"])


async def load_availability(store: BookingStore, prescriber_id: str) -> list[dict]:
    stored = await store.get_prescriber_availability(prescriber_id)
    if stored is None:
        raise NotFoundError(
            "Prescriber availability not found",
            details={"prescriber_id": prescriber_id},
        )
    return normalize(stored)


@router.get("/prescribers/{prescriber_id}/availability", response_model=AvailabilityResponse)
async def get_availability(
    prescriber_id: str,
    store: BookingStore = Depends(get_booking_store),
) -> AvailabilityResponse:
    availability = await load_availability(store, prescriber_id)
    return AvailabilityResponse.model_validate({"availability": availability})


@router.put("/prescribers/{prescriber_id}/availability", response_model=AvailabilityResponse)
async def save_availability(
    prescriber_id: str,
    body: AvailabilityPayload,
    store: BookingStore = Depends(get_booking_store),
) -> AvailabilityResponse:
    """Validate the editor's working copy and persist its canonical form."""
    availability = prepare_for_submission(body.availability)
    saved = await store.save_prescriber_availability(prescriber_id, availability)
    logger.info("Saved %d availability slot(s) for prescriber %s", len(saved), prescriber_id)
    return AvailabilityResponse.model_validate({"availability": saved})


@router.get("/availability/presets/{preset}", response_model=AvailabilityResponse)
async def get_preset(preset: str) -> AvailabilityResponse:
    return AvailabilityResponse.model_validate({"availability": apply_preset(preset)})
