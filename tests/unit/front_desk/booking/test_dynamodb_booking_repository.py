from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from front_desk.booking.domain import BookingStatus
from front_desk.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from front_desk.room.domain import RoomId
from front_desk.shared.domain.exception import OptimisticLockException


class TestDynamoDBBookingRepository:
    def test_item_round_trip(self, create_booking):
        table = MagicMock()
        repository = DynamoDBBookingRepository(table=table)
        booking = create_booking(
            discount_percent=Decimal("12.5"), advance_paid=Decimal("250.50")
        )

        repository.save(booking)
        item = table.put_item.call_args.kwargs["Item"]

        assert item["PK"] == "BOOKING#booking-1"
        assert item["GSI1SK"] == "2024-06-20#booking-1"
        assert item["discount_percent"] == "12.5"

        table.get_item.return_value = {"Item": item}
        loaded = repository.find_by_id(booking.id)

        assert loaded.stay.check_in == date(2024, 7, 1)
        assert loaded.advance_paid.amount == Decimal("250.50")
        assert loaded.guest.name == "Asha Rao"
        assert loaded.status == BookingStatus.BOOKED

    def test_open_dated_booking_omits_dates(self, create_booking):
        table = MagicMock()
        DynamoDBBookingRepository(table=table).save(
            create_booking(check_in=None, check_out=None)
        )

        item = table.put_item.call_args.kwargs["Item"]
        assert "check_in_date" not in item
        assert "check_out_date" not in item

    def test_find_all_newest_first(self):
        table = MagicMock()
        table.query.return_value = {"Items": []}

        DynamoDBBookingRepository(table=table).find_all()

        assert table.query.call_args.kwargs["ScanIndexForward"] is False

    def test_find_active_by_room(self, create_booking):
        table = MagicMock()
        repository = DynamoDBBookingRepository(table=table)
        bookings = [
            create_booking(booking_id="booking-a"),
            create_booking(booking_id="booking-b", status=BookingStatus.CHECKED_IN),
            create_booking(booking_id="booking-c", status=BookingStatus.CANCELLED),
            create_booking(booking_id="booking-d", room_id="room-102"),
        ]
        table.query.return_value = {
            "Items": [repository._to_item(booking) for booking in bookings]
        }

        active = repository.find_active_by_room(RoomId("room-101"))

        assert [str(booking.id) for booking in active] == ["booking-a", "booking-b"]

    def test_update_with_stale_status(self, create_booking):
        table = MagicMock()
        table.update_item.side_effect = ClientError(
            {"Error": {"Code": "ConditionalCheckFailedException", "Message": "x"}},
            "UpdateItem",
        )
        booking = create_booking(status=BookingStatus.CHECKED_IN)

        with pytest.raises(OptimisticLockException):
            DynamoDBBookingRepository(table=table).update(
                booking, expected_status=BookingStatus.BOOKED
            )

    def test_update_without_lock(self, create_booking):
        table = MagicMock()
        DynamoDBBookingRepository(table=table).update(create_booking())

        kwargs = table.update_item.call_args.kwargs
        assert "ConditionExpression" not in kwargs
        assert kwargs["ExpressionAttributeValues"] == {":status": "Booked"}
