from front_desk.reservation.domain import ReservationId, ReservationRepository
from front_desk.room.domain import RoomRepository
from front_desk.shared.domain.exception import ResourceNotFoundException


class DeleteReservationService:
    """仮予約削除のユースケース"""

    def __init__(
        self, repository: ReservationRepository, room_repository: RoomRepository
    ) -> None:
        self._repository = repository
        self._room_repository = room_repository

    def delete(self, reservation_id: ReservationId) -> None:
        """仮予約を削除し、押さえていた日付を客室から外す"""
        reservation = self._repository.find_by_id(reservation_id)
        if reservation is None:
            raise ResourceNotFoundException(f"Reservation not found: {reservation_id}")

        nights = reservation.reserved_nights()
        if reservation.room_id is not None and nights:
            room = self._room_repository.find_by_id(reservation.room_id)
            if room is not None:
                room.release_dates(nights)
                self._room_repository.update(room)

        self._repository.delete(reservation_id)
