from front_desk.reservation.applications.room_hold import hold_nights
from front_desk.reservation.domain import (
    Reservation,
    ReservationDetails,
    ReservationId,
    ReservationRepository,
    resolve_category,
    resolve_rate,
)
from front_desk.room.domain import Room, RoomId, RoomRepository
from front_desk.shared.domain import Money, StayPeriod
from front_desk.shared.domain.exception import ResourceNotFoundException
from front_desk.shared.domain.service import normalize_room_count


class UpdateReservationService:
    """仮予約更新のユースケース

    旧客室の仮押さえを外してから、新しい客室・日程で押さえ直す。
    """

    def __init__(
        self, repository: ReservationRepository, room_repository: RoomRepository
    ) -> None:
        self._repository = repository
        self._room_repository = room_repository

    def update(
        self,
        reservation_id: ReservationId,
        reservation_details: ReservationDetails,
        room_id: RoomId | None = None,
    ) -> Reservation:
        reservation = self._repository.find_by_id(reservation_id)
        if reservation is None:
            raise ResourceNotFoundException(f"Reservation not found: {reservation_id}")

        touched: dict[str, Room] = {}

        old_nights = reservation.reserved_nights()
        if reservation.room_id is not None and old_nights:
            old_room = self._load_room(reservation.room_id, touched)
            if old_room is not None:
                old_room.release_dates(old_nights)

        new_room = None
        if room_id is not None:
            new_room = self._load_room(room_id, touched)
            if new_room is None:
                raise ResourceNotFoundException(f"Room not found: {room_id}")

        rate = resolve_rate(reservation_details["rate"], new_room)
        reservation.revise(
            guest=reservation_details["guest"],
            stay=StayPeriod(
                check_in=reservation_details["check_in_date"],
                check_out=reservation_details["check_out_date"],
            ),
            rate=rate,
            booking_ref_no=reservation_details["booking_ref_no"],
            reservation_type=reservation_details["reservation_type"],
            category_id=resolve_category(reservation_details["category_id"], new_room),
            room_id=new_room.id if new_room is not None else None,
            number_of_rooms=normalize_room_count(reservation_details["number_of_rooms"]),
            discount_percent=reservation_details["discount_percent"],
            advance_paid=Money(
                amount=reservation_details["advance_paid"], currency=rate.currency
            ),
            payment_mode=reservation_details["payment_mode"],
        )
        reservation.change_status(
            reservation_details["status"], reservation_details["cancellation_reason"]
        )
        reservation.mark_no_show(reservation_details["is_no_show"])

        new_nights = reservation.reserved_nights()
        if new_room is not None and new_nights:
            hold_nights(new_room, new_nights)

        self._repository.update(reservation)
        for room in touched.values():
            self._room_repository.update(room)
        return reservation

    def _load_room(self, room_id: RoomId, touched: dict[str, Room]) -> Room | None:
        # 同じ客室は同じインスタンスで更新する
        key = str(room_id)
        if key not in touched:
            room = self._room_repository.find_by_id(room_id)
            if room is None:
                return None
            touched[key] = room
        return touched[key]
