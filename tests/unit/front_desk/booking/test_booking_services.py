from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from front_desk.booking.applications.create_booking import CreateBookingService
from front_desk.booking.applications.delete_booking import DeleteBookingService
from front_desk.booking.applications.quote_price import QuotePriceService
from front_desk.booking.applications.update_booking_status import (
    UpdateBookingStatusService,
)
from front_desk.booking.domain import BookingFactory, BookingId, BookingStatus
from front_desk.room.domain import RoomId, RoomStatus
from front_desk.shared.domain import StayPeriod
from front_desk.shared.domain.exception import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)


@pytest.fixture
def booking_details(guest_details):
    return {
        "grc_no": "GRC-001",
        "booking_date": date(2024, 6, 20),
        "guest": guest_details,
        "check_in_date": date(2024, 7, 1),
        "check_out_date": date(2024, 7, 3),
        "rate": None,
        "number_of_rooms": 1,
        "discount_percent": Decimal("0"),
        "advance_paid": Decimal("0"),
        "payment_mode": "Cash",
    }


class TestCreateBookingService:
    @pytest.fixture
    def room_repository(self):
        return MagicMock()

    @pytest.fixture
    def guest_service(self):
        return MagicMock()

    @pytest.fixture
    def service(self, mock_repository, room_repository, guest_service):
        return CreateBookingService(
            repository=mock_repository,
            room_repository=room_repository,
            factory=BookingFactory(),
            guest_service=guest_service,
        )

    def test_create_books_room_until_last_night(
        self,
        service,
        mock_repository,
        room_repository,
        guest_service,
        create_room,
        booking_details,
    ):
        room = create_room()
        room_repository.find_by_id.return_value = room

        booking = service.create(RoomId("room-101"), booking_details)

        assert room.status == RoomStatus.BOOKED
        assert room.booked_till_date == date(2024, 7, 2)
        mock_repository.save.assert_called_once_with(booking)
        room_repository.update.assert_called_once_with(room)
        guest_service.register.assert_called_once_with(
            booking.grc_no, booking.guest, date(2024, 7, 1)
        )

    @pytest.mark.parametrize(
        "room_kwargs",
        [
            {"booked_till_date": date(2024, 7, 1), "status": RoomStatus.BOOKED},
            {"reserved_dates": (date(2024, 7, 2),), "status": RoomStatus.RESERVED},
            {"status": RoomStatus.MAINTENANCE},
            {"is_oos": True},
        ],
    )
    def test_unavailable_room(
        self,
        service,
        mock_repository,
        room_repository,
        create_room,
        booking_details,
        room_kwargs,
    ):
        room_repository.find_by_id.return_value = create_room(**room_kwargs)

        with pytest.raises(BusinessRuleViolationException):
            service.create(RoomId("room-101"), booking_details)
        mock_repository.save.assert_not_called()

    def test_room_free_after_previous_booking(
        self, service, room_repository, create_room, booking_details
    ):
        room_repository.find_by_id.return_value = create_room(
            booked_till_date=date(2024, 6, 30), status=RoomStatus.BOOKED
        )

        booking = service.create(RoomId("room-101"), booking_details)

        assert booking.status == BookingStatus.BOOKED

    def test_missing_room(self, service, room_repository, booking_details):
        room_repository.find_by_id.return_value = None

        with pytest.raises(ResourceNotFoundException):
            service.create(RoomId("room-404"), booking_details)


class TestUpdateBookingStatusService:
    def test_check_out_releases_room(
        self, mock_repository, create_booking, create_room
    ):
        booking = create_booking(status=BookingStatus.CHECKED_IN)
        room = create_room(status=RoomStatus.BOOKED, booked_till_date=date(2024, 7, 2))
        mock_repository.find_by_id.return_value = booking
        mock_repository.find_active_by_room.return_value = [booking]
        room_repository = MagicMock()
        room_repository.find_by_id.return_value = room

        UpdateBookingStatusService(mock_repository, room_repository).change_status(
            BookingId("booking-1"), BookingStatus.CHECKED_OUT
        )

        mock_repository.update.assert_called_once_with(
            booking, expected_status=BookingStatus.CHECKED_IN
        )
        mock_repository.find_active_by_room.assert_called_once_with(RoomId("room-101"))
        assert room.status == RoomStatus.AVAILABLE
        assert room.booked_till_date is None

    def test_cancel_keeps_room_booked_by_later_booking(
        self, mock_repository, create_booking, create_room
    ):
        mock_repository.find_by_id.return_value = create_booking()
        mock_repository.find_active_by_room.return_value = [
            create_booking(
                booking_id="booking-2",
                check_in=date(2024, 7, 19),
                check_out=date(2024, 7, 21),
            )
        ]
        room = create_room(status=RoomStatus.BOOKED, booked_till_date=date(2024, 7, 20))
        room_repository = MagicMock()
        room_repository.find_by_id.return_value = room

        UpdateBookingStatusService(mock_repository, room_repository).change_status(
            BookingId("booking-1"), BookingStatus.CANCELLED
        )

        assert room.status == RoomStatus.BOOKED
        assert room.booked_till_date == date(2024, 7, 20)

    def test_cancel_later_booking_keeps_earlier_booking_held(
        self, mock_repository, create_booking, create_room, booking_details
    ):
        earlier = create_booking(booking_id="booking-a")
        later = create_booking(
            booking_id="booking-b",
            check_in=date(2024, 7, 10),
            check_out=date(2024, 7, 12),
        )
        room = create_room(status=RoomStatus.BOOKED, booked_till_date=date(2024, 7, 11))
        mock_repository.find_by_id.return_value = later
        mock_repository.find_active_by_room.return_value = [earlier, later]
        room_repository = MagicMock()
        room_repository.find_by_id.return_value = room

        UpdateBookingStatusService(mock_repository, room_repository).change_status(
            BookingId("booking-b"), BookingStatus.CANCELLED
        )

        assert room.status == RoomStatus.BOOKED
        assert room.booked_till_date == date(2024, 7, 2)
        room_repository.update.assert_called_once_with(room)

        # 先の予約と同じ日程は引き続き受け付けない
        create_service = CreateBookingService(
            repository=mock_repository,
            room_repository=room_repository,
            factory=BookingFactory(),
            guest_service=MagicMock(),
        )
        with pytest.raises(BusinessRuleViolationException):
            create_service.create(RoomId("room-101"), booking_details)
        mock_repository.save.assert_not_called()

    def test_cancel_during_maintenance_keeps_maintenance(
        self, mock_repository, create_booking, create_room
    ):
        later = create_booking(
            booking_id="booking-b",
            check_in=date(2024, 7, 10),
            check_out=date(2024, 7, 12),
        )
        room = create_room(
            status=RoomStatus.MAINTENANCE, booked_till_date=date(2024, 7, 11)
        )
        mock_repository.find_by_id.return_value = later
        mock_repository.find_active_by_room.return_value = [create_booking(), later]
        room_repository = MagicMock()
        room_repository.find_by_id.return_value = room

        UpdateBookingStatusService(mock_repository, room_repository).change_status(
            BookingId("booking-b"), BookingStatus.CANCELLED
        )

        assert room.status == RoomStatus.MAINTENANCE
        assert room.booked_till_date == date(2024, 7, 2)

    def test_check_in_keeps_room(self, mock_repository, create_booking):
        mock_repository.find_by_id.return_value = create_booking()
        room_repository = MagicMock()

        booking = UpdateBookingStatusService(
            mock_repository, room_repository
        ).change_status(BookingId("booking-1"), BookingStatus.CHECKED_IN)

        assert booking.status == BookingStatus.CHECKED_IN
        room_repository.find_by_id.assert_not_called()

    def test_same_status_skips_write(self, mock_repository, create_booking):
        mock_repository.find_by_id.return_value = create_booking()

        UpdateBookingStatusService(mock_repository, MagicMock()).change_status(
            BookingId("booking-1"), BookingStatus.BOOKED
        )

        mock_repository.update.assert_not_called()

    def test_missing(self, mock_repository):
        mock_repository.find_by_id.return_value = None

        with pytest.raises(ResourceNotFoundException):
            UpdateBookingStatusService(mock_repository, MagicMock()).change_status(
                BookingId("nope"), BookingStatus.CHECKED_IN
            )


class TestDeleteBookingService:
    def test_delete_active_booking_releases_room(
        self, mock_repository, create_booking, create_room
    ):
        mock_repository.find_by_id.return_value = create_booking()
        mock_repository.find_active_by_room.return_value = []
        room = create_room(status=RoomStatus.BOOKED, booked_till_date=date(2024, 7, 2))
        room_repository = MagicMock()
        room_repository.find_by_id.return_value = room

        DeleteBookingService(mock_repository, room_repository).delete(
            BookingId("booking-1")
        )

        assert room.status == RoomStatus.AVAILABLE
        room_repository.update.assert_called_once_with(room)
        mock_repository.delete.assert_called_once_with(BookingId("booking-1"))

    def test_delete_later_booking_keeps_earlier_booking_held(
        self, mock_repository, create_booking, create_room
    ):
        later = create_booking(
            booking_id="booking-b",
            check_in=date(2024, 7, 10),
            check_out=date(2024, 7, 12),
        )
        mock_repository.find_by_id.return_value = later
        mock_repository.find_active_by_room.return_value = [
            create_booking(booking_id="booking-a"),
            later,
        ]
        room = create_room(status=RoomStatus.BOOKED, booked_till_date=date(2024, 7, 11))
        room_repository = MagicMock()
        room_repository.find_by_id.return_value = room

        DeleteBookingService(mock_repository, room_repository).delete(
            BookingId("booking-b")
        )

        assert room.status == RoomStatus.BOOKED
        assert room.booked_till_date == date(2024, 7, 2)
        mock_repository.delete.assert_called_once_with(BookingId("booking-b"))

    def test_delete_finished_booking(self, mock_repository, create_booking):
        mock_repository.find_by_id.return_value = create_booking(
            status=BookingStatus.CHECKED_OUT
        )
        room_repository = MagicMock()

        DeleteBookingService(mock_repository, room_repository).delete(
            BookingId("booking-1")
        )

        room_repository.find_by_id.assert_not_called()
        mock_repository.delete.assert_called_once()


class TestQuotePriceService:
    def test_quote_with_explicit_rate(self):
        quote = QuotePriceService(MagicMock()).quote(
            stay=StayPeriod(check_in=date(2024, 7, 1), check_out=date(2024, 7, 4)),
            rate=Decimal("1000"),
            number_of_rooms=2,
            discount_percent=Decimal("5"),
            advance_paid=Decimal("1000"),
        )

        assert quote.breakdown.subtotal == Decimal("6000")
        assert quote.breakdown.total == Decimal("5700")
        assert quote.breakdown.balance_due == Decimal("4700")

    def test_quote_uses_room_price(self, create_room):
        room_repository = MagicMock()
        room_repository.find_by_id.return_value = create_room(price=Decimal("2500"))

        quote = QuotePriceService(room_repository).quote(
            stay=StayPeriod(check_in=None, check_out=None), room_id=RoomId("room-101")
        )

        assert quote.rate == Decimal("2500")
        assert quote.breakdown.nights == 1
        assert quote.breakdown.total == Decimal("2500")

    def test_quote_needs_rate_or_room(self):
        with pytest.raises(ValueError):
            QuotePriceService(MagicMock()).quote(
                stay=StayPeriod(check_in=None, check_out=None)
            )
