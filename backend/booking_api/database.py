"""Process-wide booking store: created at startup, shared by every request."""

import logging

from booking_api.config import Settings, settings
from booking_api.storage import BookingStore, InMemoryBookingStore, MongoBookingStore

logger = logging.getLogger(__name__)

# Set by the application lifespan, read by the ``get_store`` dependency.
_store: BookingStore | None = None


def create_store(config: Settings = settings) -> BookingStore:
    """Build the store selected by ``STORAGE_BACKEND``."""
    if config.storage_backend == "memory":
        logger.warning("Using in-memory booking store; data is lost on restart")
        return InMemoryBookingStore()
    return MongoBookingStore(
        connection_string=config.mongodb_connection_string,
        database_name=config.mongodb_database_name,
        collection_name=config.mongodb_collection_name,
    )


def set_store(store: BookingStore | None) -> None:
    global _store
    _store = store


def get_store() -> BookingStore:
    """Return the shared store for FastAPI dependency injection.

    Usage::

        @app.get("/items")
        async def get_items(store: BookingStore = Depends(get_store)):
            ...
    """
    if _store is None:
        raise RuntimeError("Booking store not initialized. Is the application lifespan running?")
    return _store
