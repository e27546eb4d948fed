from front_desk.category.domain import CategoryId, RoomCategoryRepository
from front_desk.room.domain import RoomRepository
from front_desk.shared.domain.exception import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)


class DeleteCategoryService:
    """客室カテゴリ削除のユースケース"""

    def __init__(
        self, repository: RoomCategoryRepository, room_repository: RoomRepository
    ) -> None:
        self._repository = repository
        self._room_repository = room_repository

    def delete(self, category_id: CategoryId) -> None:
        """客室が 1 つも紐付いていないカテゴリだけ削除できる"""
        if self._repository.find_by_id(category_id) is None:
            raise ResourceNotFoundException(f"Room category not found: {category_id}")

        rooms = self._room_repository.find_by_category(category_id)
        if rooms:
            raise BusinessRuleViolationException(
                f"Room category {category_id} is still used by {len(rooms)} room(s)"
            )
        self._repository.delete(category_id)
