# stayhub/db/session.py
from collections.abc import AsyncGenerator

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from stayhub.db.base import Base


def _serialize_sqlite_transactions(engine: AsyncEngine) -> None:
    """
    SQLite has no row locks, so SELECT ... FOR UPDATE renders as a plain
    SELECT. Start every transaction with BEGIN IMMEDIATE instead, which takes
    the database write lock up front; the driver's own lazy BEGIN is disabled.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _no_driver_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


class Database:
    """
    Process-wide store handle: one engine, one session factory.

    Built by the app factory, kept on `app.state.db`, disposed on shutdown.
    """

    def __init__(self, url: str, *, echo: bool = False):
        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, echo=echo, future=True)
        if self.engine.dialect.name == "sqlite":
            _serialize_sqlite_transactions(self.engine)
        self.sessionmaker = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def create_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


# FastAPI dependency
async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    database: Database = request.app.state.db
    async with database.sessionmaker() as session:
        yield session
