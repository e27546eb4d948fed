from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from front_desk.dashboard.applications.dashboard_summary import (
    DashboardSummaryService,
)
from front_desk.dashboard.domain import RevenuePeriod
from front_desk.room.domain import RoomStatus


@pytest.fixture
def rooms(create_room):
    statuses = [
        RoomStatus.BOOKED,
        RoomStatus.RESERVED,
        RoomStatus.MAINTENANCE,
    ] + [RoomStatus.AVAILABLE] * 5
    return [
        create_room(room_id=f"room-{i}", room_number=str(100 + i), status=status)
        for i, status in enumerate(statuses)
    ]


class TestDashboardSummaryService:
    def test_summarize(self, create_booking, rooms):
        booking_repository = MagicMock()
        booking_repository.find_all.return_value = [
            create_booking(booking_id=f"b-{d}", booking_date=date(2024, 7, d))
            for d in (1, 5, 3, 8)
        ]
        room_repository = MagicMock()
        room_repository.find_all.return_value = rooms

        summary = DashboardSummaryService(
            booking_repository, room_repository
        ).summarize(date(2024, 7, 10), RevenuePeriod.WEEKLY)

        assert summary.total_bookings == 4
        assert summary.total_rooms == 8
        assert summary.available_rooms == 5
        assert summary.booked_rooms == 1
        # 1/8 = 12.5% は切り上げ
        assert summary.occupancy_rate == 13
        assert summary.total_revenue == Decimal("8000")
        assert [str(b.id) for b in summary.recent_bookings] == ["b-8", "b-5", "b-3"]
        assert len(summary.revenue) == 7

    def test_no_rooms(self):
        booking_repository = MagicMock()
        booking_repository.find_all.return_value = []
        room_repository = MagicMock()
        room_repository.find_all.return_value = []

        summary = DashboardSummaryService(
            booking_repository, room_repository
        ).summarize(date(2024, 7, 10))

        assert summary.occupancy_rate == 0
        assert summary.total_revenue == Decimal("0")
        assert summary.period == RevenuePeriod.MONTHLY
