from datetime import date
from decimal import Decimal

from front_desk.booking.domain.enum import BookingStatus
from front_desk.booking.domain.value_object import BookingId
from front_desk.guest.domain import GrcNo
from front_desk.room.domain import RoomId, RoomNumber
from front_desk.shared.domain import (
    AggregateRoot,
    GuestDetails,
    Money,
    PriceBreakdown,
    StayPeriod,
    calculate_price,
)
from front_desk.shared.domain.exception import BusinessRuleViolationException

_TRANSITIONS: dict[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.BOOKED: frozenset({BookingStatus.CHECKED_IN, BookingStatus.CANCELLED}),
    BookingStatus.CHECKED_IN: frozenset({BookingStatus.CHECKED_OUT}),
    BookingStatus.CHECKED_OUT: frozenset(),
    BookingStatus.CANCELLED: frozenset(),
}


class Booking(AggregateRoot[BookingId]):
    """宿泊予約エンティティ"""

    def __init__(
        self,
        id: BookingId,
        grc_no: GrcNo,
        booking_date: date,
        guest: GuestDetails,
        room_id: RoomId,
        room_number: RoomNumber,
        stay: StayPeriod,
        rate: Money,
        number_of_rooms: int = 1,
        discount_percent: Decimal = Decimal("0"),
        advance_paid: Money | None = None,
        payment_mode: str = "Cash",
        status: BookingStatus = BookingStatus.BOOKED,
    ) -> None:
        super().__init__(id)
        if advance_paid is not None and advance_paid.currency != rate.currency:
            raise ValueError("Advance must be paid in the room rate currency")
        self._grc_no = grc_no
        self._booking_date = booking_date
        self._guest = guest
        self._room_id = room_id
        self._room_number = room_number
        self._stay = stay
        self._rate = rate
        self._number_of_rooms = number_of_rooms
        self._discount_percent = discount_percent
        self._advance_paid = advance_paid or Money.zero(rate.currency)
        self._payment_mode = payment_mode
        self._status = status

    @property
    def grc_no(self) -> GrcNo:
        return self._grc_no

    @property
    def booking_date(self) -> date:
        return self._booking_date

    @property
    def guest(self) -> GuestDetails:
        return self._guest

    @property
    def room_id(self) -> RoomId:
        return self._room_id

    @property
    def room_number(self) -> RoomNumber:
        return self._room_number

    @property
    def stay(self) -> StayPeriod:
        return self._stay

    @property
    def rate(self) -> Money:
        return self._rate

    @property
    def number_of_rooms(self) -> int:
        return self._number_of_rooms

    @property
    def discount_percent(self) -> Decimal:
        return self._discount_percent

    @property
    def advance_paid(self) -> Money:
        return self._advance_paid

    @property
    def payment_mode(self) -> str:
        return self._payment_mode

    @property
    def status(self) -> BookingStatus:
        return self._status

    @property
    def is_active(self) -> bool:
        """客室を押さえている状態か"""
        return self._status in (BookingStatus.BOOKED, BookingStatus.CHECKED_IN)

    def held_until(self) -> date:
        """客室を押さえる最終日（宿泊期間が無ければ予約日）"""
        return self._stay.last_night() or self._booking_date

    def price_breakdown(self) -> PriceBreakdown:
        """現在の入力から料金内訳を計算する"""
        return calculate_price(
            base_rate=self._rate.amount,
            nights=self._stay.nights(),
            number_of_rooms=self._number_of_rooms,
            discount_percent=self._discount_percent,
            advance_paid=self._advance_paid.amount,
        )

    def change_status(self, new_status: BookingStatus) -> None:
        """ステータスを遷移させる（同じステータスへの変更は何もしない）"""
        if new_status == self._status:
            return
        if new_status not in _TRANSITIONS[self._status]:
            raise BusinessRuleViolationException(
                f"Cannot change booking status from {self._status.value} "
                f"to {new_status.value}"
            )
        self._status = new_status

