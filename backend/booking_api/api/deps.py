"""Shared API dependencies — single import point for all routers.

Re-exports the store dependency and builds the query engine on top of it so
that router modules can import everything they need from one place::

    from booking_api.api.deps import get_query_engine
"""

from fastapi import Depends

from booking_api.database import get_store
from booking_api.services.query_engine import BookingQueryEngine
from booking_api.storage import BookingStore


def get_query_engine(store: BookingStore = Depends(get_store)) -> BookingQueryEngine:
    return BookingQueryEngine(store)


__all__ = [
    "get_store",
    "get_query_engine",
]
