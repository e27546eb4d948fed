from datetime import date
from decimal import Decimal
from typing import TypedDict

from front_desk.category.domain import CategoryId
from front_desk.guest.domain import GrcNo
from front_desk.reservation.domain.entity import Reservation
from front_desk.reservation.domain.enum import ReservationStatus
from front_desk.reservation.domain.value_object import ReservationId
from front_desk.room.domain import Room
from front_desk.shared.domain import Currency, GuestDetails, Money, StayPeriod
from front_desk.shared.domain.service import normalize_room_count


class ReservationDetails(TypedDict):
    """仮予約の入力データ"""

    grc_no: str
    booking_ref_no: str
    reservation_type: str
    guest: GuestDetails
    category_id: str | None
    check_in_date: date | None
    check_out_date: date | None
    rate: Decimal | None
    number_of_rooms: int
    discount_percent: Decimal
    advance_paid: Decimal
    payment_mode: str
    status: ReservationStatus
    cancellation_reason: str
    is_no_show: bool


class ReservationFactory:
    """仮予約を生成するFactory"""

    def create(
        self, reservation_details: ReservationDetails, room: Room | None = None
    ) -> Reservation:
        """仮予約を作成する（客室の割り当ては任意）"""
        rate = resolve_rate(reservation_details["rate"], room)
        status = reservation_details["status"]

        return Reservation(
            id=ReservationId.generate(),
            grc_no=GrcNo(reservation_details["grc_no"]),
            guest=reservation_details["guest"],
            stay=StayPeriod(
                check_in=reservation_details["check_in_date"],
                check_out=reservation_details["check_out_date"],
            ),
            rate=rate,
            booking_ref_no=reservation_details["booking_ref_no"],
            reservation_type=reservation_details["reservation_type"],
            category_id=resolve_category(reservation_details["category_id"], room),
            room_id=room.id if room is not None else None,
            number_of_rooms=normalize_room_count(reservation_details["number_of_rooms"]),
            discount_percent=reservation_details["discount_percent"],
            advance_paid=Money(
                amount=reservation_details["advance_paid"], currency=rate.currency
            ),
            payment_mode=reservation_details["payment_mode"],
            status=status,
            cancellation_reason=reservation_details["cancellation_reason"]
            if status == ReservationStatus.CANCELLED
            else "",
            is_no_show=reservation_details["is_no_show"],
        )


def resolve_rate(rate: Decimal | None, room: Room | None) -> Money:
    """料金未指定なら客室料金、客室もなければ 0"""
    if room is not None:
        if rate is None:
            return room.price
        return Money(amount=rate, currency=room.price.currency)
    amount = rate if rate is not None else Decimal("0")
    return Money(amount=amount, currency=Currency.default())


def resolve_category(category_id: str | None, room: Room | None) -> CategoryId | None:
    if category_id:
        return CategoryId(category_id)
    return room.category_id if room is not None else None
