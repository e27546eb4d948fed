"""売上の集計

- 日別: 今日を含む直近 7 日
- 月別: 今月を含む直近 12 か月
- 年別: 今年を含む直近 5 年

キャンセル済みの予約は売上に含めない。
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal

from front_desk.booking.domain import Booking, BookingStatus
from front_desk.dashboard.domain.enum import RevenuePeriod


@dataclass(frozen=True)
class RevenuePoint:
    label: str
    start: date
    amount: Decimal


def is_revenue(booking: Booking) -> bool:
    return booking.status != BookingStatus.CANCELLED


def total_revenue(bookings: Iterable[Booking]) -> Decimal:
    return sum(
        (b.price_breakdown().total for b in bookings if is_revenue(b)), Decimal("0")
    )


def revenue_series(
    bookings: Iterable[Booking], period: RevenuePeriod, today: date
) -> list[RevenuePoint]:
    """期間ごとの売上を古い順に返す（予約日で集計）"""
    totals: dict[date, Decimal] = {}
    for booking in bookings:
        if is_revenue(booking):
            key = _bucket(booking.booking_date, period)
            totals[key] = totals.get(key, Decimal("0")) + booking.price_breakdown().total

    return [
        RevenuePoint(
            label=_label(start, period),
            start=start,
            amount=totals.get(start, Decimal("0")),
        )
        for start in _buckets(period, today)
    ]


def _bucket(day: date, period: RevenuePeriod) -> date:
    if period == RevenuePeriod.WEEKLY:
        return day
    if period == RevenuePeriod.MONTHLY:
        return day.replace(day=1)
    return date(day.year, 1, 1)


def _buckets(period: RevenuePeriod, today: date) -> list[date]:
    if period == RevenuePeriod.WEEKLY:
        return [today - timedelta(days=i) for i in range(6, -1, -1)]
    if period == RevenuePeriod.MONTHLY:
        months = []
        year, month = today.year, today.month
        for _ in range(12):
            months.append(date(year, month, 1))
            year, month = (year, month - 1) if month > 1 else (year - 1, 12)
        return list(reversed(months))
    return [date(today.year - i, 1, 1) for i in range(4, -1, -1)]


def _label(start: date, period: RevenuePeriod) -> str:
    if period == RevenuePeriod.WEEKLY:
        return start.strftime("%a")
    if period == RevenuePeriod.MONTHLY:
        return start.strftime("%b")
    return str(start.year)
