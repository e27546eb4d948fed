from front_desk.booking.domain import (
    Booking,
    BookingDetails,
    BookingFactory,
    BookingRepository,
)
from front_desk.guest.applications.register_guest_visit import (
    RegisterGuestVisitService,
)
from front_desk.room.domain import RoomId, RoomRepository
from front_desk.room.domain.service import is_unavailable_during
from front_desk.shared.domain.exception import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)


class CreateBookingService:
    """宿泊予約作成のユースケース

    客室を最終宿泊日まで予約済みにし、宿泊者台帳に来館を記録する。
    """

    def __init__(
        self,
        repository: BookingRepository,
        room_repository: RoomRepository,
        factory: BookingFactory,
        guest_service: RegisterGuestVisitService,
    ) -> None:
        self._repository = repository
        self._room_repository = room_repository
        self._factory = factory
        self._guest_service = guest_service

    def create(self, room_id: RoomId, booking_details: BookingDetails) -> Booking:
        room = self._room_repository.find_by_id(room_id)
        if room is None:
            raise ResourceNotFoundException(f"Room not found: {room_id}")

        booking = self._factory.create(room, booking_details)

        if not room.is_sellable or is_unavailable_during(
            room.availability_record(), booking.stay
        ):
            raise BusinessRuleViolationException(
                f"Room {room.room_number} is not available for the requested stay"
            )

        room.book_until(booking.held_until())

        self._repository.save(booking)
        self._room_repository.update(room)
        self._guest_service.register(
            booking.grc_no,
            booking.guest,
            booking.stay.check_in or booking.booking_date,
        )
        return booking
