"""Shared fixtures: a throwaway SQLite database per test, seeded users and listings."""

from datetime import datetime
from types import SimpleNamespace

import pytest
from httpx import ASGITransport, AsyncClient

from stayhub.core.config import Settings
from stayhub.core.security import create_access_token
from stayhub.db.crud_listings import create_listing, create_property
from stayhub.db.crud_users import create_user
from stayhub.db.session import Database
from stayhub.main import create_app


@pytest.fixture
async def database(tmp_path):
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'stayhub-test.db'}")
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
async def session(database):
    async with database.sessionmaker() as s:
        yield s


@pytest.fixture
async def users(database):
    """Ids only: sessions roll back and expire ORM objects between calls."""
    async with database.sessionmaker() as s:
        owner = await create_user(s, "Olivia Owner", "owner@example.com", "secret", mobile="5550001")
        guest = await create_user(s, "Gary Guest", "guest@example.com", "secret", mobile="5550002")
        other_guest = await create_user(s, "Gina Guest", "gina@example.com", "secret")
        other_owner = await create_user(s, "Oscar Owner", "oscar@example.com", "secret")
        return SimpleNamespace(
            owner=owner.id,
            guest=guest.id,
            other_guest=other_guest.id,
            other_owner=other_owner.id,
        )


@pytest.fixture
def make_listing(database):
    async def _make(owner_id, windows, title="Lake House"):
        async with database.sessionmaker() as s:
            prop = await create_property(s, owner_id=owner_id, title=title)
            listing = await create_listing(
                s, property_id=prop.id, title=f"{title} - room", available_dates=windows
            )
            return listing.id

    return _make


@pytest.fixture
async def listing_id(users, make_listing):
    """Owner's listing, open 2024-06-01 .. 2024-06-10."""
    return await make_listing(users.owner, [(datetime(2024, 6, 1), datetime(2024, 6, 10))])


@pytest.fixture
async def app(database):
    return create_app(Settings(DATABASE_URL=database.url, LOG_LEVEL="DEBUG"), database=database)


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest.fixture
def auth_headers():
    def _headers(user_id):
        token = create_access_token({"user_id": user_id})
        return {"Authorization": f"Bearer {token}"}

    return _headers
