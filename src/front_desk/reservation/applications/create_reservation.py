from front_desk.reservation.applications.room_hold import hold_nights
from front_desk.reservation.domain import (
    Reservation,
    ReservationDetails,
    ReservationFactory,
    ReservationRepository,
)
from front_desk.room.domain import RoomId, RoomRepository
from front_desk.shared.domain.exception import ResourceNotFoundException


class CreateReservationService:
    """仮予約作成のユースケース

    客室が割り当てられていれば、滞在中の各夜をその客室に仮押さえする。
    """

    def __init__(
        self,
        repository: ReservationRepository,
        room_repository: RoomRepository,
        factory: ReservationFactory,
    ) -> None:
        self._repository = repository
        self._room_repository = room_repository
        self._factory = factory

    def create(
        self, reservation_details: ReservationDetails, room_id: RoomId | None = None
    ) -> Reservation:
        room = None
        if room_id is not None:
            room = self._room_repository.find_by_id(room_id)
            if room is None:
                raise ResourceNotFoundException(f"Room not found: {room_id}")

        reservation = self._factory.create(reservation_details, room)
        nights = reservation.reserved_nights()
        if room is not None and nights:
            hold_nights(room, nights)

        self._repository.save(reservation)
        if room is not None and nights:
            self._room_repository.update(room)
        return reservation
