# stayhub/db/crud_listings.py
"""
Read side of the listing store, as seen by the booking core.

Listings and properties are managed by the listing service; the create
helpers here only exist for seed data and tests.
"""
from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from stayhub.db.models import AvailableDate, Listing, Property


async def get_listing(
    db: AsyncSession,
    listing_id: int,
    *,
    lock: bool = False,
) -> Optional[Listing]:
    """
    Listing with its availability windows loaded.

    lock=True takes a row lock (SELECT ... FOR UPDATE) that is held until the
    caller's transaction ends.
    """
    stmt = (
        select(Listing)
        .options(selectinload(Listing.available_dates))
        .where(Listing.id == listing_id)
    )
    if lock:
        stmt = stmt.with_for_update()
    res = await db.execute(stmt)
    return res.scalar_one_or_none()


async def create_property(db: AsyncSession, *, owner_id: int, title: str) -> Property:
    prop = Property(owner_id=owner_id, title=title)
    db.add(prop)
    await db.commit()
    await db.refresh(prop)
    return prop


async def create_listing(
    db: AsyncSession,
    *,
    property_id: int,
    title: str,
    available_dates: Iterable[Tuple[datetime, datetime]] = (),
) -> Listing:
    listing = Listing(property_id=property_id, title=title)
    windows: List[AvailableDate] = [
        AvailableDate(start_date=start, end_date=end) for start, end in available_dates
    ]
    listing.available_dates = windows
    db.add(listing)
    await db.commit()
    return await get_listing(db, listing.id)
