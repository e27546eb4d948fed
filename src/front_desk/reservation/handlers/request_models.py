from pydantic import AliasChoices, Field

from front_desk.reservation.domain import ReservationDetails, ReservationStatus
from front_desk.shared.handlers.api_models import GuestFields, PricingFields


class ReservationRequest(GuestFields, PricingFields):
    """仮予約の作成・更新リクエストモデル"""

    grc_no: str = Field(..., min_length=1, max_length=50)
    booking_ref_no: str = Field(default="", max_length=50)
    reservation_type: str = Field(default="Walk-in", max_length=30)
    category_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("category", "categoryId", "category_id"),
    )
    room_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("roomAssigned", "roomId", "room_id"),
    )
    payment_mode: str = Field(default="Cash", max_length=30)
    status: ReservationStatus = ReservationStatus.CONFIRMED
    cancellation_reason: str = Field(default="", max_length=500)
    is_no_show: bool = False

    def to_details(self) -> ReservationDetails:
        return {
            "grc_no": self.grc_no,
            "booking_ref_no": self.booking_ref_no,
            "reservation_type": self.reservation_type,
            "guest": self.guest_details(),
            "category_id": self.category_id or None,
            "check_in_date": self.check_in_date,
            "check_out_date": self.check_out_date,
            "rate": self.rate,
            "number_of_rooms": self.number_of_rooms,
            "discount_percent": self.discount_percent,
            "advance_paid": self.advance_paid,
            "payment_mode": self.payment_mode,
            "status": self.status,
            "cancellation_reason": self.cancellation_reason,
            "is_no_show": self.is_no_show,
        }
