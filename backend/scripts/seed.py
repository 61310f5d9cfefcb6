# scripts/seed.py
import asyncio
from datetime import datetime

from stayhub.core.config import get_settings
from stayhub.core.security import create_access_token
from stayhub.db.session import Database
from stayhub.db.crud_users import create_user, get_user_by_email
from stayhub.db.crud_listings import create_listing, create_property


async def seed():
    database = Database(get_settings().DATABASE_URL)
    # create tables (if migrations not run)
    await database.create_all()
    async with database.sessionmaker() as db:
        owner = await get_user_by_email(db, "owner@example.com")
        if not owner:
            owner = await create_user(db, name="Owner", email="owner@example.com", password="password", mobile="+911100000000")
        guest = await get_user_by_email(db, "guest@example.com")
        if not guest:
            guest = await create_user(db, name="Guest", email="guest@example.com", password="password", mobile="+911100000001")

        prop = await create_property(db, owner_id=owner.id, title="Lake House")
        listing = await create_listing(
            db,
            property_id=prop.id,
            title="Lake House - Upper Floor",
            available_dates=[
                (datetime(2024, 6, 1), datetime(2024, 6, 10)),
                (datetime(2024, 7, 1), datetime(2024, 7, 31)),
            ],
        )
        print(f"listing id: {listing.id}")
        print(f"owner token: {create_access_token({'user_id': owner.id})}")
        print(f"guest token: {create_access_token({'user_id': guest.id})}")
    await database.dispose()
    print("Seed complete")

if __name__ == '__main__':
    asyncio.run(seed())
