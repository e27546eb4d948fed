from front_desk.category.domain.entity import RoomCategory
from front_desk.category.domain.enum import CategoryStatus
from front_desk.category.domain.value_object import CategoryId, CategoryName


class RoomCategoryFactory:
    """客室カテゴリを生成するFactory"""

    def create(self, name: str, status: str = CategoryStatus.ACTIVE.value) -> RoomCategory:
        """新規カテゴリのエンティティを作成する"""
        return RoomCategory(
            id=CategoryId.generate(),
            name=CategoryName(name),
            status=CategoryStatus(status),
        )
