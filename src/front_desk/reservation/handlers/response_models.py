from __future__ import annotations

from front_desk.reservation.domain import Reservation
from front_desk.shared.handlers.api_models import (
    CamelModel,
    GuestDetailsData,
    PaymentDetailsData,
    StayData,
)


class ReservationData(CamelModel):
    """仮予約のレスポンスモデル"""

    id: str
    grc_no: str
    booking_ref_no: str
    reservation_type: str
    status: str
    cancellation_reason: str
    is_no_show: bool
    category_id: str | None
    room_id: str | None
    payment_mode: str
    guest_details: GuestDetailsData
    booking_info: StayData
    payment_details: PaymentDetailsData

    @classmethod
    def from_entity(cls, reservation: Reservation) -> ReservationData:
        return cls(
            id=str(reservation.id),
            grc_no=str(reservation.grc_no),
            booking_ref_no=reservation.booking_ref_no,
            reservation_type=reservation.reservation_type,
            status=reservation.status.value,
            cancellation_reason=reservation.cancellation_reason,
            is_no_show=reservation.is_no_show,
            category_id=str(reservation.category_id)
            if reservation.category_id is not None
            else None,
            room_id=str(reservation.room_id) if reservation.room_id is not None else None,
            payment_mode=reservation.payment_mode,
            guest_details=GuestDetailsData.from_value(reservation.guest),
            booking_info=StayData.from_value(reservation.stay),
            payment_details=PaymentDetailsData.from_breakdown(
                reservation.price_breakdown(),
                currency=str(reservation.rate.currency),
                rate=reservation.rate.amount,
                discount_percent=reservation.discount_percent,
                advance_paid=reservation.advance_paid.amount,
            ),
        )


class ReservationResponse(CamelModel):
    success: bool = True
    reservation: ReservationData


class ReservationListResponse(CamelModel):
    success: bool = True
    reservations: list[ReservationData]
    total_count: int
