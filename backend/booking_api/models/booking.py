"""Booking record — the single entity kept in the booking collection."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from booking_api.storage.base import Document

# Stored field names (camelCase, as they appear in documents and JSON).
STATUS = "status"
HOTEL_NAME = "hotelName"
CHECK_IN_DATE = "checkInDate"
CREATED_AT = "createdAt"

# Conventional status values; not enforced on write.
STATUS_CONFIRMED = "Confirmed"
STATUS_PENDING = "Pending"
STATUS_CANCELLED = "Cancelled"

DATE_FORMAT = "%Y-%m-%d"


class Booking(BaseModel):
    """A booking as stored.

    Every field is a free-form string. Dates are ``YYYY-MM-DD`` text and are
    compared lexicographically by the store.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str | None = None
    booking_id: str | None = None
    customer_name: str | None = None
    hotel_name: str | None = None
    status: str | None = None
    check_in_date: str | None = None
    check_out_date: str | None = None
    created_at: str | None = None

    @classmethod
    def from_document(cls, document: Document) -> "Booking":
        fields = {key: value for key, value in document.items() if key != "_id"}
        return cls.model_validate({**fields, "id": str(document["_id"])})

    def to_document(self) -> Document:
        """Document body without ``_id``; the store owns identifiers."""
        return self.model_dump(by_alias=True, exclude={"id"})

    def __repr__(self) -> str:
        return f"<Booking(id={self.id}, booking_id={self.booking_id}, status={self.status})>"
