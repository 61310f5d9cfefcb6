# stayhub/db/crud_bookings.py

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from stayhub.db.models import Booking, Listing, Property, User


def _with_listing():
    return selectinload(Booking.listing).selectinload(Listing.available_dates)


def _with_listing_and_property():
    listing = selectinload(Booking.listing)
    return [
        listing.selectinload(Listing.available_dates),
        listing.selectinload(Listing.property),
    ]


async def create_booking(
    db: AsyncSession,
    *,
    listing_id: int,
    guest_id: int,
    check_in: datetime,
    check_out: datetime,
    number_of_adults: int,
    number_of_children: int,
    total_price: Decimal,
) -> Booking:
    """
    Stage a new booking and flush it so it gets its id.
    Committing is the caller's job; the insert shares the caller's transaction.
    """
    booking = Booking(
        listing_id=listing_id,
        guest_id=guest_id,
        check_in=check_in,
        check_out=check_out,
        number_of_adults=number_of_adults,
        number_of_children=number_of_children,
        total_price=total_price,
    )
    db.add(booking)
    await db.flush()
    return booking


async def get_booking(db: AsyncSession, booking_id: int) -> Optional[Booking]:
    stmt = select(Booking).options(_with_listing()).where(Booking.id == booking_id)
    res = await db.execute(stmt)
    return res.scalar_one_or_none()


def overlapping_stmt(listing_id: int, check_in: datetime, check_out: datetime):
    """
    Bookings on listing_id whose stay overlaps [check_in, check_out).
    Touching endpoints do not overlap.

    Locking read: under REPEATABLE READ it returns the latest committed rows,
    not the transaction snapshot.
    """
    return (
        select(Booking)
        .where(Booking.listing_id == listing_id)
        .where(Booking.check_in < check_out)
        .where(Booking.check_out > check_in)
        .order_by(Booking.check_in)
        .with_for_update()
    )


async def find_overlapping(
    db: AsyncSession,
    listing_id: int,
    check_in: datetime,
    check_out: datetime,
) -> List[Booking]:
    res = await db.execute(overlapping_stmt(listing_id, check_in, check_out))
    return list(res.scalars().all())


async def list_bookings_for_guest(db: AsyncSession, guest_id: int) -> List[Booking]:
    stmt = (
        select(Booking)
        .options(*_with_listing_and_property())
        .where(Booking.guest_id == guest_id)
        .order_by(Booking.id.desc())
    )
    res = await db.execute(stmt)
    return list(res.scalars().all())


async def list_bookings_for_guest_on_listing(
    db: AsyncSession,
    guest_id: int,
    listing_id: int,
) -> List[Booking]:
    stmt = (
        select(Booking)
        .options(_with_listing())
        .where(Booking.guest_id == guest_id)
        .where(Booking.listing_id == listing_id)
        .order_by(Booking.id.desc())
    )
    res = await db.execute(stmt)
    return list(res.scalars().all())


async def list_bookings_for_owner(db: AsyncSession, owner_id: int) -> List[Booking]:
    """
    All bookings on listings whose property is owned by owner_id.

    Inner join through listing -> property, so bookings on other owners'
    listings never come back. Guest is loaded with contact columns only.
    """
    stmt = (
        select(Booking)
        .join(Listing, Booking.listing_id == Listing.id)
        .join(Property, Listing.property_id == Property.id)
        .where(Property.owner_id == owner_id)
        .options(
            *_with_listing_and_property(),
            selectinload(Booking.guest).load_only(
                User.id, User.name, User.email, User.mobile
            ),
        )
        .order_by(Booking.id.desc())
    )
    res = await db.execute(stmt)
    return list(res.scalars().all())
