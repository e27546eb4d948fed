from front_desk.booking.applications.room_release import release_room_held_by
from front_desk.booking.domain import Booking, BookingId, BookingRepository, BookingStatus
from front_desk.room.domain import RoomRepository
from front_desk.shared.domain.exception import ResourceNotFoundException


class UpdateBookingStatusService:
    """予約ステータス変更のユースケース

    チェックアウト・キャンセル時は残りの有効な予約に合わせて客室の予約済みを付け直す。
    """

    def __init__(
        self, repository: BookingRepository, room_repository: RoomRepository
    ) -> None:
        self._repository = repository
        self._room_repository = room_repository

    def change_status(self, booking_id: BookingId, new_status: BookingStatus) -> Booking:
        booking = self._repository.find_by_id(booking_id)
        if booking is None:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")

        current_status = booking.status
        booking.change_status(new_status)
        if booking.status == current_status:
            return booking

        self._repository.update(booking, expected_status=current_status)

        if not booking.is_active:
            release_room_held_by(booking, self._repository, self._room_repository)
        return booking
