from dataclasses import dataclass
from decimal import Decimal

from front_desk.room.domain import RoomId, RoomRepository
from front_desk.shared.domain import Currency, PriceBreakdown, StayPeriod, calculate_price
from front_desk.shared.domain.exception import ResourceNotFoundException


@dataclass(frozen=True)
class PriceQuote:
    currency: Currency
    rate: Decimal
    stay: StayPeriod
    discount_percent: Decimal
    advance_paid: Decimal
    breakdown: PriceBreakdown


class QuotePriceService:
    """料金見積もり（保存はしない）"""

    def __init__(self, room_repository: RoomRepository) -> None:
        self._room_repository = room_repository

    def quote(
        self,
        stay: StayPeriod,
        rate: Decimal | None = None,
        room_id: RoomId | None = None,
        number_of_rooms: int = 1,
        discount_percent: Decimal = Decimal("0"),
        advance_paid: Decimal = Decimal("0"),
    ) -> PriceQuote:
        """料金未指定なら客室の料金で見積もる"""
        currency = Currency.default()
        if rate is None:
            if room_id is None:
                raise ValueError("rate or roomId is required")
            room = self._room_repository.find_by_id(room_id)
            if room is None:
                raise ResourceNotFoundException(f"Room not found: {room_id}")
            rate = room.price.amount
            currency = room.price.currency

        breakdown = calculate_price(
            base_rate=rate,
            nights=stay.nights(),
            number_of_rooms=number_of_rooms,
            discount_percent=discount_percent,
            advance_paid=advance_paid,
        )
        return PriceQuote(
            currency=currency,
            rate=rate,
            stay=stay,
            discount_percent=discount_percent,
            advance_paid=advance_paid,
            breakdown=breakdown,
        )
