from front_desk.category.domain import CategoryId, RoomCategoryRepository
from front_desk.room.domain import Room, RoomDetails, RoomFactory, RoomRepository
from front_desk.shared.domain.exception import DuplicateResourceException


class CreateRoomService:
    """客室登録のユースケース"""

    def __init__(
        self,
        repository: RoomRepository,
        category_repository: RoomCategoryRepository,
        factory: RoomFactory,
    ) -> None:
        self._repository = repository
        self._category_repository = category_repository
        self._factory = factory

    def create(self, room_details: RoomDetails) -> Room:
        """客室を登録する（部屋番号は一意）"""
        category_id = CategoryId(room_details["category_id"])
        if self._category_repository.find_by_id(category_id) is None:
            raise ValueError(f"Unknown room category: {category_id}")

        room = self._factory.create(room_details)
        if any(r.room_number == room.room_number for r in self._repository.find_all()):
            raise DuplicateResourceException(
                f"Room number already exists: {room.room_number}"
            )

        self._repository.save(room)
        return room
