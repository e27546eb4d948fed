from front_desk.category.domain import (
    CategoryId,
    CategoryName,
    CategoryStatus,
    RoomCategory,
    RoomCategoryRepository,
)
from front_desk.shared.domain.exception import ResourceNotFoundException


class UpdateCategoryService:
    """客室カテゴリ更新のユースケース"""

    def __init__(self, repository: RoomCategoryRepository) -> None:
        self._repository = repository

    def update(self, category_id: CategoryId, name: str, status: str) -> RoomCategory:
        """カテゴリ名とステータスを更新する"""
        category = self._repository.find_by_id(category_id)
        if category is None:
            raise ResourceNotFoundException(f"Room category not found: {category_id}")

        category.rename(CategoryName(name))
        category.change_status(CategoryStatus(status))
        self._repository.update(category)
        return category
