"""Filter builder — turns optional query parameters into MongoDB filter documents.

Every builder returns a plain filter dict that any ``BookingStore`` accepts.
Blank parameters (``None``, empty or whitespace-only) add no clause.
"""

import re

from booking_api.models.booking import CHECK_IN_DATE, CREATED_AT, HOTEL_NAME, STATUS
from booking_api.storage.base import Filter


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def contains_ignore_case(field: str, text: str) -> Filter:
    """Case-insensitive substring match on ``field``."""
    return {field: {"$regex": re.escape(text), "$options": "i"}}


def combine(*clauses: Filter) -> Filter:
    """AND the non-empty clauses together; no clauses means "match all"."""
    present = [clause for clause in clauses if clause]
    if not present:
        return {}
    if len(present) == 1:
        return present[0]
    return {"$and": present}


def status_filter(status: str | None) -> Filter:
    return {} if is_blank(status) else contains_ignore_case(STATUS, status)


def hotel_filter(hotel: str | None) -> Filter:
    return {} if is_blank(hotel) else contains_ignore_case(HOTEL_NAME, hotel)


def created_between(date_from: str | None, date_to: str | None) -> Filter:
    """Inclusive ``createdAt`` bounds; either side may be omitted."""
    bounds: dict[str, str] = {}
    if not is_blank(date_from):
        bounds["$gte"] = date_from
    if not is_blank(date_to):
        bounds["$lte"] = date_to
    return {CREATED_AT: bounds} if bounds else {}


def created_on(day: str) -> Filter:
    return {CREATED_AT: day}


def check_in_on_or_after(day: str) -> Filter:
    return {CHECK_IN_DATE: {"$gte": day}}


def combined_filter(
    status: str | None = None,
    hotel: str | None = None,
    date_from: str | None = None,
    date_to: str | None = None,
) -> Filter:
    return combine(
        status_filter(status),
        hotel_filter(hotel),
        created_between(date_from, date_to),
    )
