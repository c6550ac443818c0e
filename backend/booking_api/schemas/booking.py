"""Pydantic v2 request/response schemas for booking endpoints."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class BookingCreate(BaseModel):
    """Client-supplied booking fields.

    No content validation: values are stored as literal text. ``id`` and
    ``createdAt`` are owned by the server and ignored if sent.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    booking_id: str | None = None
    customer_name: str | None = None
    hotel_name: str | None = None
    status: str | None = None
    check_in_date: str | None = None
    check_out_date: str | None = None


class BookingUpdate(BookingCreate):
    """Full replacement body, used by both PUT and PATCH."""


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class MessageResponse(BaseModel):
    """Generic message response."""

    message: str


class BookingCreatedResponse(MessageResponse):
    """Returned after a booking is created."""

    id: str
