# stayhub/services/booking_service.py
"""
Booking placement: availability and conflict checks, then insert.

Checks run in a fixed order and the first failure is the only one reported:

1. required fields present (zero and empty count as missing)
2. listing exists
3. stay lies inside one advertised availability window
4. stay does not overlap an existing booking on the listing

Steps 2-4 and the insert run in a fresh transaction that opens with a lock on
the listing row (SELECT ... FOR UPDATE); whatever the session read before
(e.g. the caller lookup) is committed first so its snapshot is not reused.
The overlap query is a locking read as well, so it sees rows committed by
the request that held the lock before us. Two requests for the same listing
therefore cannot both pass the overlap check.
"""
import logging
from datetime import datetime
from decimal import Decimal
from typing import Iterable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from stayhub.core.errors import ConflictError, NotFoundError, PolicyError, ValidationError
from stayhub.core.validators import to_utc_naive
from stayhub.db import crud_bookings, crud_listings
from stayhub.db.models import AvailableDate, Booking

logger = logging.getLogger(__name__)


def within_availability(
    windows: Iterable[AvailableDate],
    check_in: datetime,
    check_out: datetime,
) -> bool:
    """True if some window has start <= check_in and check_out <= end."""
    return any(
        w.start_date <= check_in and check_out <= w.end_date for w in windows
    )


async def place_booking(
    db: AsyncSession,
    *,
    guest_id: int,
    listing_id: Optional[int],
    check_in: Optional[datetime],
    check_out: Optional[datetime],
    number_of_adults: Optional[int],
    total_price: Optional[Decimal],
    number_of_children: Optional[int] = None,
) -> Booking:
    required = {
        "listing": listing_id,
        "checkIn": check_in,
        "checkOut": check_out,
        "numberOfAdults": number_of_adults,
        "totalPrice": total_price,
    }
    missing = [name for name, value in required.items() if not value]
    if missing:
        raise ValidationError(f"Please provide all fields! Missing: {', '.join(missing)}")

    check_in = to_utc_naive(check_in)
    check_out = to_utc_naive(check_out)

    if db.in_transaction():
        await db.commit()

    try:
        listing = await crud_listings.get_listing(db, listing_id, lock=True)
        if listing is None:
            raise NotFoundError("Invalid listing id!")

        if not within_availability(listing.available_dates, check_in, check_out):
            raise PolicyError(
                "Booking dates do not fall within the available dates for this listing."
            )

        clashes = await crud_bookings.find_overlapping(db, listing_id, check_in, check_out)
        if clashes:
            raise ConflictError(
                "Booking conflict: the selected dates overlap with existing bookings."
            )

        booking = await crud_bookings.create_booking(
            db,
            listing_id=listing_id,
            guest_id=guest_id,
            check_in=check_in,
            check_out=check_out,
            number_of_adults=number_of_adults,
            number_of_children=number_of_children or 0,
            total_price=total_price,
        )
        await db.commit()
    except (NotFoundError, PolicyError, ConflictError) as exc:
        await db.rollback()
        logger.warning(
            "booking rejected listing=%s guest=%s: %s", listing_id, guest_id, exc.message
        )
        raise
    except Exception:
        await db.rollback()
        raise

    logger.info(
        "booking %s created listing=%s guest=%s %s..%s",
        booking.id, listing_id, guest_id, check_in.isoformat(), check_out.isoformat(),
    )
    return booking
