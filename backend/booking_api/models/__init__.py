"""Stored record types for the booking collection."""

from booking_api.models.booking import Booking

__all__ = [
    "Booking",
]
