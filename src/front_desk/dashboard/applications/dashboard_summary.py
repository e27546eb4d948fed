from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from front_desk.booking.domain import Booking, BookingRepository
from front_desk.dashboard.domain import (
    RevenuePeriod,
    RevenuePoint,
    revenue_series,
    total_revenue,
)
from front_desk.room.domain import RoomRepository, RoomStatus

RECENT_BOOKINGS = 3


@dataclass(frozen=True)
class DashboardSummary:
    total_bookings: int
    total_rooms: int
    available_rooms: int
    booked_rooms: int
    occupancy_rate: int
    total_revenue: Decimal
    recent_bookings: list[Booking]
    period: RevenuePeriod
    revenue: list[RevenuePoint]


class DashboardSummaryService:
    """ダッシュボードの集計（件数・売上・稼働率・直近の予約）"""

    def __init__(
        self, booking_repository: BookingRepository, room_repository: RoomRepository
    ) -> None:
        self._booking_repository = booking_repository
        self._room_repository = room_repository

    def summarize(
        self, today: date, period: RevenuePeriod = RevenuePeriod.MONTHLY
    ) -> DashboardSummary:
        bookings = sorted(
            self._booking_repository.find_all(),
            key=lambda b: b.booking_date,
            reverse=True,
        )
        rooms = self._room_repository.find_all()

        available = sum(1 for r in rooms if r.status == RoomStatus.AVAILABLE)
        booked = sum(1 for r in rooms if r.status == RoomStatus.BOOKED)
        occupancy = _percent(booked, len(rooms))

        return DashboardSummary(
            total_bookings=len(bookings),
            total_rooms=len(rooms),
            available_rooms=available,
            booked_rooms=booked,
            occupancy_rate=occupancy,
            total_revenue=total_revenue(bookings),
            recent_bookings=bookings[:RECENT_BOOKINGS],
            period=period,
            revenue=revenue_series(bookings, period, today),
        )


def _percent(part: int, whole: int) -> int:
    """百分率を整数に四捨五入する（0.5 は切り上げ）"""
    if whole == 0:
        return 0
    ratio = Decimal(part) * 100 / Decimal(whole)
    return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
