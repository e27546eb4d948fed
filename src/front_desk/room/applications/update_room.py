from front_desk.category.domain import CategoryId, RoomCategoryRepository
from front_desk.room.domain import Room, RoomDetails, RoomId, RoomNumber, RoomRepository
from front_desk.shared.domain import Money
from front_desk.shared.domain.exception import (
    DuplicateResourceException,
    ResourceNotFoundException,
)


class UpdateRoomService:
    """客室更新のユースケース"""

    def __init__(
        self, repository: RoomRepository, category_repository: RoomCategoryRepository
    ) -> None:
        self._repository = repository
        self._category_repository = category_repository

    def update(
        self,
        room_id: RoomId,
        room_details: RoomDetails,
        maintenance: bool | None = None,
    ) -> Room:
        """客室の基本情報（とメンテナンス状態）を更新する"""
        room = self._repository.find_by_id(room_id)
        if room is None:
            raise ResourceNotFoundException(f"Room not found: {room_id}")

        category_id = CategoryId(room_details["category_id"])
        if self._category_repository.find_by_id(category_id) is None:
            raise ValueError(f"Unknown room category: {category_id}")

        room_number = RoomNumber(room_details["room_number"])
        if any(
            r.room_number == room_number and r.id != room.id
            for r in self._repository.find_all()
        ):
            raise DuplicateResourceException(f"Room number already exists: {room_number}")

        room.update_details(
            room_number=room_number,
            title=room_details["title"],
            category_id=category_id,
            price=Money(amount=room_details["price_amount"], currency=room.price.currency),
            floor=room_details["floor"],
            is_oos=room_details["is_oos"],
            extra_bed=room_details["extra_bed"],
        )
        if maintenance is True:
            room.start_maintenance()
        elif maintenance is False:
            room.finish_maintenance()

        self._repository.update(room)
        return room
