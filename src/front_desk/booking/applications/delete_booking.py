from front_desk.booking.applications.room_release import release_room_held_by
from front_desk.booking.domain import BookingId, BookingRepository
from front_desk.room.domain import RoomRepository
from front_desk.shared.domain.exception import ResourceNotFoundException


class DeleteBookingService:
    """予約削除のユースケース"""

    def __init__(
        self, repository: BookingRepository, room_repository: RoomRepository
    ) -> None:
        self._repository = repository
        self._room_repository = room_repository

    def delete(self, booking_id: BookingId) -> None:
        """予約を削除する（有効な予約なら客室の予約済みを付け直す）"""
        booking = self._repository.find_by_id(booking_id)
        if booking is None:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")

        if booking.is_active:
            release_room_held_by(booking, self._repository, self._room_repository)

        self._repository.delete(booking_id)
