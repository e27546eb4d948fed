from datetime import date
from decimal import Decimal
from typing import TypedDict

from front_desk.booking.domain.entity import Booking
from front_desk.booking.domain.enum import BookingStatus
from front_desk.booking.domain.value_object import BookingId
from front_desk.guest.domain import GrcNo
from front_desk.room.domain import Room
from front_desk.shared.domain import GuestDetails, Money, StayPeriod
from front_desk.shared.domain.service import normalize_room_count


class BookingDetails(TypedDict):
    """宿泊予約の入力データ"""

    grc_no: str
    booking_date: date
    guest: GuestDetails
    check_in_date: date
    check_out_date: date
    rate: Decimal | None
    number_of_rooms: int
    discount_percent: Decimal
    advance_paid: Decimal
    payment_mode: str


class BookingFactory:
    """宿泊予約を生成するFactory"""

    def create(self, room: Room, booking_details: BookingDetails) -> Booking:
        """新規予約のエンティティを作成する（料金未指定なら客室料金を使う）"""
        currency = room.price.currency
        rate = booking_details["rate"]

        return Booking(
            id=BookingId.generate(),
            grc_no=GrcNo(booking_details["grc_no"]),
            booking_date=booking_details["booking_date"],
            guest=booking_details["guest"],
            room_id=room.id,
            room_number=room.room_number,
            stay=StayPeriod(
                check_in=booking_details["check_in_date"],
                check_out=booking_details["check_out_date"],
            ),
            rate=room.price if rate is None else Money(amount=rate, currency=currency),
            number_of_rooms=normalize_room_count(booking_details["number_of_rooms"]),
            discount_percent=booking_details["discount_percent"],
            advance_paid=Money(amount=booking_details["advance_paid"], currency=currency),
            payment_mode=booking_details["payment_mode"],
            status=BookingStatus.BOOKED,
        )
