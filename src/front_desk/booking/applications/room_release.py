from front_desk.booking.domain import Booking, BookingRepository
from front_desk.room.domain import RoomRepository


def release_room_held_by(
    booking: Booking,
    repository: BookingRepository,
    room_repository: RoomRepository,
) -> None:
    """予約が客室を手放したときに客室の予約済みを付け直す

    同じ客室に残っている有効な予約のうち最も遅い最終宿泊日まで予約済みとし、
    残りが無ければ予約済みを解除する。
    """
    room = room_repository.find_by_id(booking.room_id)
    if room is None:
        return

    remaining = [
        other.held_until()
        for other in repository.find_active_by_room(booking.room_id)
        if other.id != booking.id
    ]
    if remaining:
        room.keep_booked_until(max(remaining))
    else:
        room.release_booking()
    room_repository.update(room)
