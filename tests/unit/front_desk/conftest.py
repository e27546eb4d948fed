import json
import os
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

# handler モジュールは import 時にリポジトリ（boto3）を生成するため先に設定する
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-south-1")
os.environ.setdefault("TABLE_NAME", "front-desk-test")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "front-desk-test")
os.environ.setdefault("HOTEL_CURRENCY", "INR")

from front_desk.booking.domain import Booking, BookingId, BookingStatus  # noqa: E402
from front_desk.category.domain import (  # noqa: E402
    CategoryId,
    CategoryName,
    CategoryStatus,
    RoomCategory,
)
from front_desk.guest.domain import GrcNo  # noqa: E402
from front_desk.reservation.domain import (  # noqa: E402
    Reservation,
    ReservationId,
    ReservationStatus,
)
from front_desk.room.domain import Room, RoomId, RoomNumber, RoomStatus  # noqa: E402
from front_desk.shared.domain import (  # noqa: E402
    GuestDetails,
    Money,
    StayPeriod,
)


@dataclass
class FakeLambdaContext:
    function_name: str = "test-function"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-south-1:123456789012:function:test-function"
    )
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def api_event():
    """API Gateway (REST, Lambda プロキシ統合) のイベントを生成する Factory fixture"""

    def _factory(
        body: dict | None = None,
        path_parameters: dict | None = None,
        query: dict | None = None,
        method: str = "GET",
    ) -> dict:
        return {
            "httpMethod": method,
            "path": "/api",
            "headers": {"Content-Type": "application/json"},
            "pathParameters": path_parameters,
            "queryStringParameters": query,
            "requestContext": {"requestId": "test-request"},
            "body": json.dumps(body) if body is not None else None,
            "isBase64Encoded": False,
        }

    return _factory


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def guest_details():
    return GuestDetails(
        name="Asha Rao",
        salutation="Ms",
        mobile_no="9876543210",
        email="asha@example.com",
        city="Pune",
    )


@pytest.fixture
def create_category():
    def _factory(
        category_id: str = "cat-deluxe",
        name: str = "Deluxe",
        status: CategoryStatus = CategoryStatus.ACTIVE,
    ) -> RoomCategory:
        return RoomCategory(
            id=CategoryId(value=category_id),
            name=CategoryName(value=name),
            status=status,
        )

    return _factory


@pytest.fixture
def create_room():
    """Room を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        room_id: str = "room-101",
        room_number: str = "101",
        category_id: str = "cat-deluxe",
        price: Decimal = Decimal("1000"),
        status: RoomStatus = RoomStatus.AVAILABLE,
        is_oos: bool = False,
        booked_till_date: date | None = None,
        reserved_dates: tuple[date, ...] = (),
    ) -> Room:
        return Room(
            id=RoomId(value=room_id),
            room_number=RoomNumber(value=room_number),
            title=f"Room {room_number}",
            category_id=CategoryId(value=category_id),
            price=Money.of(price, "INR"),
            floor=1,
            status=status,
            is_oos=is_oos,
            booked_till_date=booked_till_date,
            reserved_dates=reserved_dates,
        )

    return _factory


@pytest.fixture
def create_booking(guest_details):
    def _factory(
        booking_id: str = "booking-1",
        status: BookingStatus = BookingStatus.BOOKED,
        room_id: str = "room-101",
        check_in: date | None = date(2024, 7, 1),
        check_out: date | None = date(2024, 7, 3),
        booking_date: date = date(2024, 6, 20),
        rate: Decimal = Decimal("1000"),
        number_of_rooms: int = 1,
        discount_percent: Decimal = Decimal("0"),
        advance_paid: Decimal = Decimal("0"),
    ) -> Booking:
        return Booking(
            id=BookingId(value=booking_id),
            grc_no=GrcNo(value="GRC-001"),
            booking_date=booking_date,
            guest=guest_details,
            room_id=RoomId(value=room_id),
            room_number=RoomNumber(value="101"),
            stay=StayPeriod(check_in=check_in, check_out=check_out),
            rate=Money.of(rate, "INR"),
            number_of_rooms=number_of_rooms,
            discount_percent=discount_percent,
            advance_paid=Money.of(advance_paid, "INR"),
            status=status,
        )

    return _factory


@pytest.fixture
def create_reservation(guest_details):
    def _factory(
        reservation_id: str = "reservation-1",
        status: ReservationStatus = ReservationStatus.CONFIRMED,
        room_id: str | None = "room-101",
        check_in: date | None = date(2024, 7, 10),
        check_out: date | None = date(2024, 7, 12),
        rate: Decimal = Decimal("1500"),
    ) -> Reservation:
        return Reservation(
            id=ReservationId(value=reservation_id),
            grc_no=GrcNo(value="GRC-001"),
            guest=guest_details,
            stay=StayPeriod(check_in=check_in, check_out=check_out),
            rate=Money.of(rate, "INR"),
            category_id=CategoryId(value="cat-deluxe"),
            room_id=RoomId(value=room_id) if room_id else None,
            status=status,
        )

    return _factory
