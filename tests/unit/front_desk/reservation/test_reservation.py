from datetime import date
from decimal import Decimal

from front_desk.reservation.domain import ReservationFactory, ReservationStatus


class TestReservation:
    def test_reserved_nights(self, create_reservation):
        reservation = create_reservation()

        assert reservation.holds_room
        assert reservation.reserved_nights() == [date(2024, 7, 10), date(2024, 7, 11)]

    def test_cancelled_or_unassigned_holds_nothing(self, create_reservation):
        assert create_reservation(room_id=None).reserved_nights() == []
        assert (
            create_reservation(status=ReservationStatus.CANCELLED).reserved_nights()
            == []
        )

    def test_undated_reservation_holds_nothing(self, create_reservation):
        reservation = create_reservation(check_in=None, check_out=None)

        assert reservation.holds_room
        assert reservation.reserved_nights() == []

    def test_cancellation_reason_only_kept_when_cancelled(self, create_reservation):
        reservation = create_reservation()

        reservation.change_status(ReservationStatus.CANCELLED, "Guest changed plans")
        assert reservation.cancellation_reason == "Guest changed plans"

        reservation.change_status(ReservationStatus.TENTATIVE, "ignored")
        assert reservation.cancellation_reason == ""

    def test_price_breakdown(self, create_reservation):
        breakdown = create_reservation(rate=Decimal("1500")).price_breakdown()

        assert breakdown.nights == 2
        assert breakdown.total == Decimal("3000")


class TestReservationFactory:
    def test_create_without_room(self, guest_details):
        reservation = ReservationFactory().create(
            {
                "grc_no": "GRC-010",
                "booking_ref_no": "OTA-77",
                "reservation_type": "Online",
                "guest": guest_details,
                "category_id": "cat-suite",
                "check_in_date": date(2024, 8, 1),
                "check_out_date": date(2024, 8, 2),
                "rate": None,
                "number_of_rooms": 1,
                "discount_percent": Decimal("0"),
                "advance_paid": Decimal("0"),
                "payment_mode": "Card",
                "status": ReservationStatus.WAITING,
                "cancellation_reason": "should be dropped",
                "is_no_show": False,
            }
        )

        assert reservation.room_id is None
        assert str(reservation.category_id) == "cat-suite"
        assert reservation.rate.amount == Decimal("0")
        assert reservation.cancellation_reason == ""
