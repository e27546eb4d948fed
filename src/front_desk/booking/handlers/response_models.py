from __future__ import annotations

from datetime import date

from front_desk.booking.applications.quote_price import PriceQuote
from front_desk.booking.domain import Booking
from front_desk.shared.handlers.api_models import (
    CamelModel,
    GuestDetailsData,
    PaymentDetailsData,
    StayData,
)


class BookingData(CamelModel):
    """宿泊予約のレスポンスモデル"""

    id: str
    grc_no: str
    booking_date: date
    status: str
    room_id: str
    room_number: str
    payment_mode: str
    guest_details: GuestDetailsData
    booking_info: StayData
    payment_details: PaymentDetailsData

    @classmethod
    def from_entity(cls, booking: Booking) -> BookingData:
        return cls(
            id=str(booking.id),
            grc_no=str(booking.grc_no),
            booking_date=booking.booking_date,
            status=booking.status.value,
            room_id=str(booking.room_id),
            room_number=str(booking.room_number),
            payment_mode=booking.payment_mode,
            guest_details=GuestDetailsData.from_value(booking.guest),
            booking_info=StayData.from_value(booking.stay),
            payment_details=PaymentDetailsData.from_breakdown(
                booking.price_breakdown(),
                currency=str(booking.rate.currency),
                rate=booking.rate.amount,
                discount_percent=booking.discount_percent,
                advance_paid=booking.advance_paid.amount,
            ),
        )


class BookingResponse(CamelModel):
    success: bool = True
    booking: BookingData


class BookingListResponse(CamelModel):
    success: bool = True
    bookings: list[BookingData]
    total_count: int


class QuoteResponse(CamelModel):
    success: bool = True
    booking_info: StayData
    payment_details: PaymentDetailsData

    @classmethod
    def from_quote(cls, quote: PriceQuote) -> QuoteResponse:
        return cls(
            booking_info=StayData.from_value(quote.stay),
            payment_details=PaymentDetailsData.from_breakdown(
                quote.breakdown,
                currency=str(quote.currency),
                rate=quote.rate,
                discount_percent=quote.discount_percent,
                advance_paid=quote.advance_paid,
            ),
        )
