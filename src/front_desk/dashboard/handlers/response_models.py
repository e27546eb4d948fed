from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from front_desk.booking.handlers.response_models import BookingData
from front_desk.dashboard.applications.dashboard_summary import DashboardSummary
from front_desk.shared.handlers.api_models import CamelModel

CENT = Decimal("0.01")


class StatsData(CamelModel):
    total_bookings: int
    total_rooms: int
    available_rooms: int
    booked_rooms: int
    occupancy_rate: int
    total_revenue: Decimal


class RevenuePointData(CamelModel):
    label: str
    start: date
    amount: Decimal


class DashboardResponse(CamelModel):
    """ダッシュボードのレスポンスモデル"""

    success: bool = True
    stats: StatsData
    recent_bookings: list[BookingData]
    period: str
    revenue: list[RevenuePointData]

    @classmethod
    def from_summary(cls, summary: DashboardSummary) -> DashboardResponse:
        return cls(
            stats=StatsData(
                total_bookings=summary.total_bookings,
                total_rooms=summary.total_rooms,
                available_rooms=summary.available_rooms,
                booked_rooms=summary.booked_rooms,
                occupancy_rate=summary.occupancy_rate,
                total_revenue=_round(summary.total_revenue),
            ),
            recent_bookings=[BookingData.from_entity(b) for b in summary.recent_bookings],
            period=summary.period.value,
            revenue=[
                RevenuePointData(label=p.label, start=p.start, amount=_round(p.amount))
                for p in summary.revenue
            ],
        )


def _round(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)
