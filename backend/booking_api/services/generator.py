"""Random booking generator for demo data and load testing."""

import random
from datetime import date, timedelta

from booking_api.models.booking import (
    DATE_FORMAT,
    STATUS_CANCELLED,
    STATUS_CONFIRMED,
    STATUS_PENDING,
)
from booking_api.storage.base import Document

HOTELS = ["Hotel Taj", "Hotel Royal", "Hotel Grand", "Hotel Paradise"]
STATUSES = [STATUS_CONFIRMED, STATUS_PENDING, STATUS_CANCELLED]
CUSTOMER_NAMES = ["Rahul", "Amit", "Sneha", "Priya", "Arjun", "Meera", "Neha", "Rohit"]

# Inclusive day offsets.
CREATED_DAYS_AGO = (0, 89)
CHECK_IN_AFTER_CREATED = (1, 4)
CHECK_OUT_AFTER_CREATED = (6, 9)


def generate_random_bookings(
    count: int,
    rng: random.Random | None = None,
    today: date | None = None,
) -> list[Document]:
    """Build ``count`` synthetic booking documents.

    ``createdAt`` falls within the last 90 days. Check-in and check-out are
    both offset from ``createdAt`` (not from each other).

    Args:
        count: Number of documents; zero or negative yields an empty list.
        rng: Random source, seedable for reproducible data.
        today: Reference day, defaults to the local server date.
    """
    rng = rng or random.Random()
    today = today or date.today()

    documents: list[Document] = []
    for _ in range(max(count, 0)):
        created = today - timedelta(days=rng.randint(*CREATED_DAYS_AGO))
        documents.append(
            {
                "bookingId": f"B{rng.randint(1000, 9998)}",
                "customerName": rng.choice(CUSTOMER_NAMES),
                "hotelName": rng.choice(HOTELS),
                "status": rng.choice(STATUSES),
                "checkInDate": (created + timedelta(days=rng.randint(*CHECK_IN_AFTER_CREATED))).strftime(DATE_FORMAT),
                "checkOutDate": (created + timedelta(days=rng.randint(*CHECK_OUT_AFTER_CREATED))).strftime(DATE_FORMAT),
                "createdAt": created.strftime(DATE_FORMAT),
            }
        )
    return documents
