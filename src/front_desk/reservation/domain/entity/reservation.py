from datetime import date
from decimal import Decimal

from front_desk.category.domain import CategoryId
from front_desk.guest.domain import GrcNo
from front_desk.reservation.domain.enum import ReservationStatus
from front_desk.reservation.domain.value_object import ReservationId
from front_desk.room.domain import RoomId
from front_desk.shared.domain import (
    AggregateRoot,
    GuestDetails,
    Money,
    PriceBreakdown,
    StayPeriod,
    calculate_price,
)


class Reservation(AggregateRoot[ReservationId]):
    """仮予約エンティティ

    客室が割り当てられていてキャンセルされていない間は、
    滞在中の各夜をその客室の仮押さえ日として保持する。
    """

    def __init__(
        self,
        id: ReservationId,
        grc_no: GrcNo,
        guest: GuestDetails,
        stay: StayPeriod,
        rate: Money,
        booking_ref_no: str = "",
        reservation_type: str = "Walk-in",
        category_id: CategoryId | None = None,
        room_id: RoomId | None = None,
        number_of_rooms: int = 1,
        discount_percent: Decimal = Decimal("0"),
        advance_paid: Money | None = None,
        payment_mode: str = "Cash",
        status: ReservationStatus = ReservationStatus.CONFIRMED,
        cancellation_reason: str = "",
        is_no_show: bool = False,
    ) -> None:
        super().__init__(id)
        self._grc_no = grc_no
        self._guest = guest
        self._stay = stay
        self._rate = rate
        self._booking_ref_no = booking_ref_no
        self._reservation_type = reservation_type
        self._category_id = category_id
        self._room_id = room_id
        self._number_of_rooms = number_of_rooms
        self._discount_percent = discount_percent
        self._advance_paid = advance_paid or Money.zero(rate.currency)
        self._payment_mode = payment_mode
        self._status = status
        self._cancellation_reason = cancellation_reason
        self._is_no_show = is_no_show

    @property
    def grc_no(self) -> GrcNo:
        return self._grc_no

    @property
    def guest(self) -> GuestDetails:
        return self._guest

    @property
    def stay(self) -> StayPeriod:
        return self._stay

    @property
    def rate(self) -> Money:
        return self._rate

    @property
    def booking_ref_no(self) -> str:
        return self._booking_ref_no

    @property
    def reservation_type(self) -> str:
        return self._reservation_type

    @property
    def category_id(self) -> CategoryId | None:
        return self._category_id

    @property
    def room_id(self) -> RoomId | None:
        return self._room_id

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
    def status(self) -> ReservationStatus:
        return self._status

    @property
    def cancellation_reason(self) -> str:
        return self._cancellation_reason

    @property
    def is_no_show(self) -> bool:
        return self._is_no_show

    @property
    def holds_room(self) -> bool:
        """客室の日付を押さえているか"""
        return self._room_id is not None and self._status != ReservationStatus.CANCELLED

    def reserved_nights(self) -> list[date]:
        """客室に仮押さえする日付（押さえていなければ空）"""
        if not self.holds_room:
            return []
        return self._stay.each_night()

    def price_breakdown(self) -> PriceBreakdown:
        return calculate_price(
            base_rate=self._rate.amount,
            nights=self._stay.nights(),
            number_of_rooms=self._number_of_rooms,
            discount_percent=self._discount_percent,
            advance_paid=self._advance_paid.amount,
        )

    def revise(
        self,
        guest: GuestDetails,
        stay: StayPeriod,
        rate: Money,
        booking_ref_no: str,
        reservation_type: str,
        category_id: CategoryId | None,
        room_id: RoomId | None,
        number_of_rooms: int,
        discount_percent: Decimal,
        advance_paid: Money,
        payment_mode: str,
    ) -> None:
        """仮予約の内容を更新する"""
        if advance_paid.currency != rate.currency:
            raise ValueError("Advance must be paid in the room rate currency")
        self._guest = guest
        self._stay = stay
        self._rate = rate
        self._booking_ref_no = booking_ref_no
        self._reservation_type = reservation_type
        self._category_id = category_id
        self._room_id = room_id
        self._number_of_rooms = number_of_rooms
        self._discount_percent = discount_percent
        self._advance_paid = advance_paid
        self._payment_mode = payment_mode

    def change_status(
        self, status: ReservationStatus, cancellation_reason: str = ""
    ) -> None:
        """ステータスを変更する（キャンセル以外では理由を消す）"""
        self._status = status
        self._cancellation_reason = (
            cancellation_reason if status == ReservationStatus.CANCELLED else ""
        )

    def mark_no_show(self, is_no_show: bool = True) -> None:
        self._is_no_show = is_no_show
