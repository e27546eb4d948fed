from front_desk.category.domain import (
    RoomCategory,
    RoomCategoryFactory,
    RoomCategoryRepository,
)


class CreateCategoryService:
    """客室カテゴリ登録のユースケース"""

    def __init__(
        self, repository: RoomCategoryRepository, factory: RoomCategoryFactory
    ) -> None:
        self._repository = repository
        self._factory = factory

    def create(self, name: str, status: str) -> RoomCategory:
        """カテゴリを登録する"""
        category = self._factory.create(name=name, status=status)
        self._repository.save(category)
        return category
