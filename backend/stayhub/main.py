import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stayhub.core.config import Settings, get_settings
from stayhub.core.errors import register_exception_handlers
from stayhub.core.logging import configure_logging
from stayhub.db.session import Database
from stayhub.api.routers import (
    bookings as bookings_router,
    host as host_router,
)


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.PROJECT_NAME)

    # One store handle per process; request handlers reach it through get_db
    app.state.db = database or Database(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

    # ---------------------------
    # CORS
    # ---------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # ---------------------------
    # Startup / shutdown
    # ---------------------------
    @app.on_event("startup")
    async def on_startup():
        await app.state.db.create_all()

    @app.on_event("shutdown")
    async def on_shutdown():
        await app.state.db.dispose()

    # ---------------------------
    # Routers
    # ---------------------------
    app.include_router(bookings_router.router, prefix="/api/bookings", tags=["bookings"])
    app.include_router(host_router.router, prefix="/api/host", tags=["host"])

    # ---------------------------
    # Health check
    # ---------------------------
    @app.get("/ping")
    async def ping():
        return {"status": "ok"}

    return app


# ---------------------------
# Run
# ---------------------------
if __name__ == "__main__":
    uvicorn.run("stayhub.main:create_app", factory=True, host="0.0.0.0", port=8000, reload=True)
