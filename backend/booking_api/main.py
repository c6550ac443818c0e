"""Booking Records API — FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from booking_api.api.v1.analytics import router as analytics_router
from booking_api.api.v1.bookings import router as bookings_router
from booking_api.config import settings
from booking_api.database import create_store, get_store, set_store
from booking_api.storage import BookingStore

# Configure root logger so all booking_api.* loggers output to stderr.
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open one store for the process lifetime and close it on shutdown."""
    store = create_store(settings)
    set_store(store)
    logger.info("%s started with %s store", settings.app_name, settings.storage_backend)
    yield
    await store.close()
    set_store(None)


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Booking records with filters and dashboard analytics.",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers — analytics first so its fixed paths win over /{booking_id}.
app.include_router(analytics_router)
app.include_router(bookings_router)


@app.get("/health", tags=["health"])
async def health_check(store: BookingStore = Depends(get_store)) -> dict[str, str]:
    """Health check endpoint; reports whether the store answers a ping."""
    try:
        await store.ping()
    except Exception:
        logger.exception("Store ping failed")
        return {"status": "degraded", "service": settings.app_name}
    return {"status": "healthy", "service": settings.app_name}


@app.get("/", tags=["root"])
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }


def run() -> None:
    """Serve the API with uvicorn on the configured host and port."""
    import uvicorn

    uvicorn.run("booking_api.main:app", host=settings.host, port=settings.port, reload=settings.debug)
