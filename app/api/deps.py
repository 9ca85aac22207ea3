from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_session
from app.services.booking_store import BookingStore, SqlBookingStore


async def get_booking_store(session: AsyncSession = Depends(get_session)) -> BookingStore:
    return SqlBookingStore(session)
