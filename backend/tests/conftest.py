"""Shared test configuration and fixtures.

Every test gets a fresh in-memory store. The API client overrides the
``get_store`` dependency so requests hit that same store; the application
lifespan (which would open a MongoDB connection) is never run.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from booking_api.database import get_store
from booking_api.main import app
from booking_api.services.query_engine import BookingQueryEngine
from booking_api.storage import InMemoryBookingStore

# ---------------------------------------------------------------------------
# Store / engine
# ---------------------------------------------------------------------------


@pytest.fixture
def store() -> InMemoryBookingStore:
    return InMemoryBookingStore()


@pytest.fixture
def engine(store: InMemoryBookingStore) -> BookingQueryEngine:
    return BookingQueryEngine(store)


@pytest_asyncio.fixture
async def client(store: InMemoryBookingStore) -> AsyncGenerator[AsyncClient, None]:
    """Provide an httpx AsyncClient wired to the test store."""
    app.dependency_overrides[get_store] = lambda: store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Convenience fixtures: booking documents
# ---------------------------------------------------------------------------


def booking_document(**overrides) -> dict:
    """Return a stored booking document with sensible defaults."""
    document = {
        "bookingId": "B1234",
        "customerName": "Priya",
        "hotelName": "Hotel Taj",
        "status": "Confirmed",
        "checkInDate": "2024-03-02",
        "checkOutDate": "2024-03-07",
        "createdAt": "2024-03-01",
    }
    document.update(overrides)
    return document


@pytest.fixture
def make_booking():
    """Factory fixture: ``make_booking(status="Pending")`` returns a booking document."""
    return booking_document


@pytest_asyncio.fixture
async def sample_bookings(store: InMemoryBookingStore) -> list[str]:
    """Five bookings across three hotels, three statuses and four days."""
    return await store.insert_many(
        [
            booking_document(bookingId="B1001", hotelName="Hotel Taj", status="Confirmed", createdAt="2024-03-01"),
            booking_document(bookingId="B1002", hotelName="Hotel Royal", status="Pending", createdAt="2024-03-05"),
            booking_document(bookingId="B1003", hotelName="Hotel Taj", status="Cancelled", createdAt="2024-03-10"),
            booking_document(bookingId="B1004", hotelName="Hotel Grand", status="Confirmed", createdAt="2024-03-05"),
            booking_document(bookingId="B1005", hotelName="Hotel Royal", status="Confirmed", createdAt="2024-03-20"),
        ]
    )
