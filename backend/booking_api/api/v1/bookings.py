"""Bookings API router — CRUD, filters, pagination and demo data.

Fixed paths (``/by-status``, ``/paged``, ...) are declared before
``/{booking_id}`` so they are matched first.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from booking_api.api.deps import get_query_engine
from booking_api.config import settings
from booking_api.models.booking import Booking
from booking_api.schemas.booking import (
    BookingCreate,
    BookingCreatedResponse,
    BookingUpdate,
    MessageResponse,
)
from booking_api.services.query_engine import BookingQueryEngine

router = APIRouter(prefix="/api/v1/bookings", tags=["bookings"])


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Booking not found",
    )


async def _replace(booking_id: str, body: BookingUpdate, engine: BookingQueryEngine) -> Booking:
    updated = await engine.update(booking_id, Booking(**body.model_dump()))
    if updated is None:
        raise _not_found()
    return updated


# ---------------------------------------------------------------------------
# Collection endpoints
# ---------------------------------------------------------------------------


@router.get("", response_model=list[Booking], summary="List all bookings")
async def list_bookings(engine: BookingQueryEngine = Depends(get_query_engine)) -> list[Booking]:
    return await engine.get_all()


@router.post(
    "",
    response_model=BookingCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new booking",
)
async def create_booking(
    body: BookingCreate,
    engine: BookingQueryEngine = Depends(get_query_engine),
) -> dict:
    """Store a booking as sent. ``createdAt`` is set to today's date."""
    booking = await engine.create(Booking(**body.model_dump()))
    return {"message": "Booking created successfully", "id": booking.id}


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------


@router.get("/by-status", response_model=list[Booking], summary="Bookings whose status contains the text")
async def bookings_by_status(
    status_text: str | None = Query(None, alias="status", description="Case-insensitive partial status"),
    engine: BookingQueryEngine = Depends(get_query_engine),
) -> list[Booking]:
    return await engine.by_status(status_text)


@router.get("/by-hotel", response_model=list[Booking], summary="Bookings whose hotel name contains the text")
async def bookings_by_hotel(
    hotel: str | None = Query(None, description="Case-insensitive partial hotel name"),
    engine: BookingQueryEngine = Depends(get_query_engine),
) -> list[Booking]:
    return await engine.by_hotel(hotel)


@router.get("/by-date", response_model=list[Booking], summary="Bookings created within a date range")
async def bookings_by_date_range(
    date_from: str | None = Query(None, alias="from", description="createdAt >= this date (YYYY-MM-DD)"),
    date_to: str | None = Query(None, alias="to", description="createdAt <= this date (YYYY-MM-DD)"),
    engine: BookingQueryEngine = Depends(get_query_engine),
) -> list[Booking]:
    return await engine.by_date_range(date_from, date_to)


@router.get("/by-day", response_model=list[Booking], summary="Bookings created on one day")
async def bookings_by_day(
    day: str | None = Query(None, alias="date", description="Exact createdAt (YYYY-MM-DD)"),
    engine: BookingQueryEngine = Depends(get_query_engine),
) -> list[Booking]:
    return await engine.by_day(day)


@router.get("/upcoming", response_model=list[Booking], summary="Bookings checking in today or later")
async def upcoming_check_ins(engine: BookingQueryEngine = Depends(get_query_engine)) -> list[Booking]:
    return await engine.upcoming_check_ins()


@router.get("/paged", response_model=list[Booking], summary="One page of bookings")
async def paged_bookings(
    page: int = Query(1, description="1-indexed page; values below 1 return the first page"),
    page_size: int = Query(10, alias="pageSize", description="Items per page"),
    engine: BookingQueryEngine = Depends(get_query_engine),
) -> list[Booking]:
    return await engine.paginated(page, page_size)


@router.get("/filter", response_model=list[Booking], summary="Combined status, hotel and date filter")
async def filter_bookings(
    status_text: str | None = Query(None, alias="status"),
    hotel: str | None = Query(None),
    date_from: str | None = Query(None, alias="from"),
    date_to: str | None = Query(None, alias="to"),
    engine: BookingQueryEngine = Depends(get_query_engine),
) -> list[Booking]:
    """Every supplied filter must match. Results are newest first."""
    return await engine.combined_filter(status_text, hotel, date_from, date_to)


# ---------------------------------------------------------------------------
# Utilities
# ---------------------------------------------------------------------------


@router.post("/generate", response_model=MessageResponse, summary="Insert random demo bookings")
async def generate_bookings(
    count: int = Query(settings.generate_default_count, description="Number of bookings to insert"),
    engine: BookingQueryEngine = Depends(get_query_engine),
) -> dict:
    await engine.generate_random(count)
    return {"message": f"{count} random bookings inserted successfully"}


# ---------------------------------------------------------------------------
# Single booking
# ---------------------------------------------------------------------------


@router.get("/{booking_id}", response_model=Booking, summary="Get a booking")
async def get_booking(
    booking_id: str,
    engine: BookingQueryEngine = Depends(get_query_engine),
) -> Booking:
    booking = await engine.get_by_id(booking_id)
    if booking is None:
        raise _not_found()
    return booking


@router.put("/{booking_id}", response_model=Booking, summary="Replace a booking")
async def update_booking(
    booking_id: str,
    body: BookingUpdate,
    engine: BookingQueryEngine = Depends(get_query_engine),
) -> Booking:
    return await _replace(booking_id, body, engine)


@router.patch("/{booking_id}", response_model=Booking, summary="Edit a booking")
async def edit_booking(
    booking_id: str,
    body: BookingUpdate,
    engine: BookingQueryEngine = Depends(get_query_engine),
) -> Booking:
    """Same full replacement as PUT; omitted fields are cleared."""
    return await _replace(booking_id, body, engine)


@router.delete("/{booking_id}", response_model=MessageResponse, summary="Delete a booking")
async def delete_booking(
    booking_id: str,
    engine: BookingQueryEngine = Depends(get_query_engine),
) -> dict:
    if not await engine.delete(booking_id):
        raise _not_found()
    return {"message": "Booking deleted successfully"}
