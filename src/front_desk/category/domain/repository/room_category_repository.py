from abc import abstractmethod

from front_desk.category.domain.entity import RoomCategory
from front_desk.category.domain.value_object import CategoryId
from front_desk.shared.domain import Repository


class RoomCategoryRepository(Repository[RoomCategory, CategoryId]):
    """客室カテゴリリポジトリのインターフェース"""

    @abstractmethod
    def save(self, category: RoomCategory) -> None:
        """カテゴリを新規保存する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, category_id: CategoryId) -> RoomCategory | None:
        """カテゴリIDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[RoomCategory]:
        """全カテゴリを名前順に取得する"""
        raise NotImplementedError

    @abstractmethod
    def update(self, category: RoomCategory) -> None:
        """カテゴリを更新する"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, category_id: CategoryId) -> None:
        """カテゴリを削除する"""
        raise NotImplementedError
