# stayhub/services/booking_queries.py
from typing import List, Union

from sqlalchemy.ext.asyncio import AsyncSession

from stayhub.core.errors import NotFoundError
from stayhub.core.validators import parse_id
from stayhub.db import crud_bookings
from stayhub.db.models import Booking


async def list_my_bookings(db: AsyncSession, caller_id: int) -> List[Booking]:
    """
    Caller's bookings as guest, listing and property expanded.
    No bookings at all is reported as NotFoundError.
    """
    bookings = await crud_bookings.list_bookings_for_guest(db, caller_id)
    if not bookings:
        raise NotFoundError("No bookings found for this user.")
    return bookings


async def get_booking(db: AsyncSession, booking_id: Union[str, int]) -> Booking:
    booking = await crud_bookings.get_booking(db, parse_id(booking_id))
    if booking is None:
        raise NotFoundError("Booking not found")
    return booking


async def list_my_bookings_for_listing(
    db: AsyncSession,
    listing_id: Union[str, int],
    caller_id: int,
) -> List[Booking]:
    # an empty list is a normal answer here
    return await crud_bookings.list_bookings_for_guest_on_listing(
        db, caller_id, parse_id(listing_id)
    )


async def list_my_reservations(db: AsyncSession, owner_id: int) -> List[Booking]:
    """Bookings made on listings of properties the caller owns."""
    return await crud_bookings.list_bookings_for_owner(db, owner_id)
