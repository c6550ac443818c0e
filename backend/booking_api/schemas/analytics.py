"""Pydantic v2 schemas for analytics endpoints.

All of these are derived on every request and never stored.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class StatusCount(BaseModel):
    """Number of bookings sharing one value of a grouped field.

    Also used for hotel counts, in which case ``status`` holds the hotel name.
    """

    status: str
    count: int


class TrendData(BaseModel):
    """Number of bookings created on one day."""

    date: str
    count: int


class DashboardSummary(BaseModel):
    """Total bookings and per-status totals."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_bookings: int = 0
    confirmed: int = 0
    pending: int = 0
    cancelled: int = 0


class DashboardData(BaseModel):
    """Everything the dashboard renders, in one payload."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    summary: DashboardSummary = Field(default_factory=DashboardSummary)
    status_chart: list[StatusCount] = Field(default_factory=list)
    hotel_chart: list[StatusCount] = Field(default_factory=list)
    trend_chart: list[TrendData] = Field(default_factory=list)
