"""Booking storage adapters.

The query engine only depends on the ``BookingStore`` protocol, so either
implementation can be injected::

    from booking_api.storage import InMemoryBookingStore, MongoBookingStore
"""

from booking_api.storage.base import ASCENDING, DESCENDING, BookingStore, Document, Filter, Sort
from booking_api.storage.memory import InMemoryBookingStore
from booking_api.storage.mongo import MongoBookingStore

__all__ = [
    "ASCENDING",
    "DESCENDING",
    "BookingStore",
    "Document",
    "Filter",
    "InMemoryBookingStore",
    "MongoBookingStore",
    "Sort",
]
