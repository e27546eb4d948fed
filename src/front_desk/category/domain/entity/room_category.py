from front_desk.category.domain.enum import CategoryStatus
from front_desk.category.domain.value_object import CategoryId, CategoryName
from front_desk.shared.domain import AggregateRoot


class RoomCategory(AggregateRoot[CategoryId]):
    """客室カテゴリエンティティ"""

    def __init__(
        self,
        id: CategoryId,
        name: CategoryName,
        status: CategoryStatus = CategoryStatus.ACTIVE,
    ) -> None:
        super().__init__(id)
        self._name = name
        self._status = status

    @property
    def name(self) -> CategoryName:
        return self._name

    @property
    def status(self) -> CategoryStatus:
        return self._status

    @property
    def is_active(self) -> bool:
        return self._status == CategoryStatus.ACTIVE

    def rename(self, name: CategoryName) -> None:
        self._name = name

    def change_status(self, status: CategoryStatus) -> None:
        self._status = status
