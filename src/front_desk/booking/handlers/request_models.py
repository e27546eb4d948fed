from datetime import date

from pydantic import AliasChoices, Field, field_validator

from front_desk.booking.domain import BookingDetails, BookingStatus
from front_desk.shared.handlers.api_models import (
    CamelModel,
    GuestFields,
    PricingFields,
    date_part,
)


class BookingRequest(GuestFields, PricingFields):
    """宿泊予約作成リクエストモデル"""

    grc_no: str = Field(..., min_length=1, max_length=50)
    booking_date: date | None = None
    room_id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("roomId", "roomAssigned", "room_id"),
    )
    check_in_date: date = Field(
        ..., validation_alias=AliasChoices("checkInDate", "check_in_date")
    )
    check_out_date: date = Field(
        ..., validation_alias=AliasChoices("checkOutDate", "check_out_date")
    )
    payment_mode: str = Field(default="Cash", max_length=30)

    @field_validator("booking_date", mode="before")
    @classmethod
    def strip_booking_time(cls, v: object) -> object:
        return date_part(v)

    def to_details(self, today: date) -> BookingDetails:
        return {
            "grc_no": self.grc_no,
            "booking_date": self.booking_date or today,
            "guest": self.guest_details(),
            "check_in_date": self.check_in_date,
            "check_out_date": self.check_out_date,
            "rate": self.rate,
            "number_of_rooms": self.number_of_rooms,
            "discount_percent": self.discount_percent,
            "advance_paid": self.advance_paid,
            "payment_mode": self.payment_mode,
        }


class QuoteRequest(PricingFields):
    """料金見積もりリクエストモデル"""

    room_id: str | None = Field(
        default=None, validation_alias=AliasChoices("roomId", "roomAssigned", "room_id")
    )


class BookingStatusRequest(CamelModel):
    status: BookingStatus
