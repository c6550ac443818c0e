"""Booking query engine — CRUD, filters, pagination and dashboard analytics.

The engine is stateless apart from the injected store. Two error policies
apply:

- CRUD and filter operations let storage errors propagate to the caller.
- Analytics operations log storage errors and return empty or all-zero
  results, so the dashboard keeps rendering while the store misbehaves.
"""

import logging
import random
from datetime import date

from booking_api.models.booking import (
    CHECK_IN_DATE,
    CREATED_AT,
    DATE_FORMAT,
    HOTEL_NAME,
    STATUS,
    STATUS_CANCELLED,
    STATUS_CONFIRMED,
    STATUS_PENDING,
    Booking,
)
from booking_api.schemas.analytics import DashboardData, DashboardSummary, StatusCount, TrendData
from booking_api.services import filters
from booking_api.services.generator import generate_random_bookings
from booking_api.storage.base import ASCENDING, DESCENDING, BookingStore

logger = logging.getLogger(__name__)


def local_today() -> str:
    """Today's date on the server clock, as ``YYYY-MM-DD``."""
    return date.today().strftime(DATE_FORMAT)


def page_window(page: int, page_size: int) -> tuple[int, int]:
    """Translate a 1-indexed page into ``(skip, limit)``.

    Pages below 1 are clamped to the first page. ``page_size`` has no upper
    bound.
    """
    page = max(page, 1)
    return (page - 1) * page_size, page_size


class BookingQueryEngine:
    """Every booking operation the HTTP layer exposes, over one ``BookingStore``."""

    def __init__(self, store: BookingStore, rng: random.Random | None = None) -> None:
        self._store = store
        self._rng = rng

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    async def get_all(self) -> list[Booking]:
        return await self._find()

    async def get_by_id(self, booking_id: str) -> Booking | None:
        document = await self._store.find_one(booking_id)
        return Booking.from_document(document) if document is not None else None

    async def create(self, booking: Booking) -> Booking:
        """Insert a booking, stamping ``createdAt`` with today's date.

        Any client-provided ``id`` or ``createdAt`` is discarded.
        """
        document = booking.to_document()
        document[CREATED_AT] = local_today()
        booking_id = await self._store.insert_one(document)
        logger.info("Created booking %s (%s)", booking_id, document.get("bookingId"))
        return Booking.from_document({**document, "_id": booking_id})

    async def update(self, booking_id: str, booking: Booking) -> Booking | None:
        """Replace a booking wholesale; ``None`` when it does not exist.

        The stored ``createdAt`` is kept; every other field comes from ``booking``.
        """
        existing = await self._store.find_one(booking_id)
        if existing is None:
            return None

        document = booking.to_document()
        document[CREATED_AT] = existing.get(CREATED_AT)
        if not await self._store.replace_one(booking_id, document):
            return None
        return Booking.from_document({**document, "_id": booking_id})

    async def delete(self, booking_id: str) -> bool:
        deleted = await self._store.delete_one(booking_id)
        if deleted:
            logger.info("Deleted booking %s", booking_id)
        return deleted

    # ------------------------------------------------------------------
    # Filters
    # ------------------------------------------------------------------

    async def by_status(self, status: str | None) -> list[Booking]:
        """Case-insensitive partial match on status. Blank input matches nothing."""
        if filters.is_blank(status):
            return []
        return await self._find(filters.status_filter(status))

    async def by_hotel(self, hotel: str | None) -> list[Booking]:
        """Case-insensitive partial match on hotel name. Blank input matches nothing."""
        if filters.is_blank(hotel):
            return []
        return await self._find(filters.hotel_filter(hotel))

    async def by_date_range(self, date_from: str | None, date_to: str | None) -> list[Booking]:
        """Bookings created within ``[date_from, date_to]``, oldest first."""
        return await self._find(
            filters.created_between(date_from, date_to),
            sort=[(CREATED_AT, ASCENDING)],
        )

    async def by_day(self, day: str | None) -> list[Booking]:
        if filters.is_blank(day):
            return []
        return await self._find(filters.created_on(day))

    async def upcoming_check_ins(self) -> list[Booking]:
        """Bookings checking in today or later, soonest first."""
        return await self._find(
            filters.check_in_on_or_after(local_today()),
            sort=[(CHECK_IN_DATE, ASCENDING)],
        )

    async def paginated(self, page: int, page_size: int) -> list[Booking]:
        if page_size < 1:
            # A store reads limit 0 as "no limit".
            return []
        skip, limit = page_window(page, page_size)
        return await self._find(skip=skip, limit=limit)

    async def combined_filter(
        self,
        status: str | None = None,
        hotel: str | None = None,
        date_from: str | None = None,
        date_to: str | None = None,
    ) -> list[Booking]:
        """AND of every non-blank filter, newest first."""
        return await self._find(
            filters.combined_filter(status, hotel, date_from, date_to),
            sort=[(CREATED_AT, DESCENDING)],
        )

    # ------------------------------------------------------------------
    # Analytics
    # ------------------------------------------------------------------

    async def status_count(self) -> list[StatusCount]:
        try:
            return [StatusCount(status=key, count=count) for key, count in await self._group_counts(STATUS)]
        except Exception:
            logger.exception("Status count aggregation failed")
            return []

    async def hotel_count(self) -> list[StatusCount]:
        try:
            return [StatusCount(status=key, count=count) for key, count in await self._group_counts(HOTEL_NAME)]
        except Exception:
            logger.exception("Hotel count aggregation failed")
            return []

    async def trend(self) -> list[TrendData]:
        try:
            trend = [TrendData(date=key, count=count) for key, count in await self._group_counts(CREATED_AT)]
            return sorted(trend, key=lambda point: point.date)
        except Exception:
            logger.exception("Booking trend aggregation failed")
            return []

    async def dashboard_summary(self) -> DashboardSummary:
        try:
            return DashboardSummary(
                total_bookings=await self._store.count({}),
                confirmed=await self._store.count({STATUS: STATUS_CONFIRMED}),
                pending=await self._store.count({STATUS: STATUS_PENDING}),
                cancelled=await self._store.count({STATUS: STATUS_CANCELLED}),
            )
        except Exception:
            logger.exception("Dashboard summary failed")
            return DashboardSummary()

    async def dashboard_data(self) -> DashboardData:
        """Summary plus the status, hotel and trend charts."""
        # Each part already falls back to its own default; this guard only
        # covers failures while assembling the payload.
        try:
            return DashboardData(
                summary=await self.dashboard_summary(),
                status_chart=await self.status_count(),
                hotel_chart=await self.hotel_count(),
                trend_chart=await self.trend(),
            )
        except Exception:
            logger.exception("Dashboard data failed")
            return DashboardData()

    # ------------------------------------------------------------------
    # Utilities
    # ------------------------------------------------------------------

    async def generate_random(self, count: int) -> int:
        """Insert ``count`` random bookings in one batch; returns how many were inserted."""
        documents = generate_random_bookings(count, rng=self._rng)
        if not documents:
            return 0
        await self._store.insert_many(documents)
        logger.info("Inserted %d random bookings", len(documents))
        return len(documents)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _find(self, filter=None, sort=None, skip: int = 0, limit: int = 0) -> list[Booking]:
        documents = await self._store.find(filter, sort=sort, skip=skip, limit=limit)
        return [Booking.from_document(document) for document in documents]

    async def _group_counts(self, field: str) -> list[tuple[str, int]]:
        """``(value, count)`` per distinct non-null ``field`` value, ascending by value."""
        groups = await self._store.group_count(field)
        return [(group["_id"], int(group["count"])) for group in groups if group.get("_id") is not None]
