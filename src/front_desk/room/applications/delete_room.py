from front_desk.room.domain import RoomId, RoomRepository, RoomStatus
from front_desk.shared.domain.exception import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)


class DeleteRoomService:
    """客室削除のユースケース"""

    def __init__(self, repository: RoomRepository) -> None:
        self._repository = repository

    def delete(self, room_id: RoomId) -> None:
        """宿泊中でない客室を削除する"""
        room = self._repository.find_by_id(room_id)
        if room is None:
            raise ResourceNotFoundException(f"Room not found: {room_id}")
        if room.status == RoomStatus.BOOKED:
            raise BusinessRuleViolationException(
                f"Room {room.room_number} is booked and cannot be deleted"
            )
        self._repository.delete(room_id)
