"""Analytics API router — status, hotel and trend counts for the dashboard.

These endpoints never fail because of the store: on a storage error they
answer with empty charts and zero totals.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from booking_api.api.deps import get_query_engine
from booking_api.schemas.analytics import DashboardData, DashboardSummary, StatusCount, TrendData
from booking_api.services.query_engine import BookingQueryEngine

router = APIRouter(prefix="/api/v1/bookings", tags=["analytics"])


@router.get("/status-count", response_model=list[StatusCount])
async def get_status_count(engine: BookingQueryEngine = Depends(get_query_engine)) -> list[StatusCount]:
    """Number of bookings per status, ascending by status."""
    return await engine.status_count()


@router.get("/hotel-count", response_model=list[StatusCount])
async def get_hotel_count(engine: BookingQueryEngine = Depends(get_query_engine)) -> list[StatusCount]:
    """Number of bookings per hotel, ascending by hotel name."""
    return await engine.hotel_count()


@router.get("/trend", response_model=list[TrendData])
async def get_trend(engine: BookingQueryEngine = Depends(get_query_engine)) -> list[TrendData]:
    """Number of bookings created per day, oldest day first."""
    return await engine.trend()


@router.get("/dashboard-summary", response_model=DashboardSummary)
async def get_dashboard_summary(engine: BookingQueryEngine = Depends(get_query_engine)) -> DashboardSummary:
    return await engine.dashboard_summary()


@router.get("/dashboard-data", response_model=DashboardData)
async def get_dashboard_data(engine: BookingQueryEngine = Depends(get_query_engine)) -> DashboardData:
    return await engine.dashboard_data()
