from abc import abstractmethod

from front_desk.category.domain import CategoryId
from front_desk.room.domain.entity import Room
from front_desk.room.domain.value_object import RoomId
from front_desk.shared.domain import Repository


class RoomRepository(Repository[Room, RoomId]):
    """客室リポジトリのインターフェース"""

    @abstractmethod
    def save(self, room: Room) -> None:
        """客室を新規保存する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, room_id: RoomId) -> Room | None:
        """客室IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Room]:
        """全客室を部屋番号順に取得する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_category(self, category_id: CategoryId) -> list[Room]:
        """カテゴリに属する客室を取得する"""
        raise NotImplementedError

    @abstractmethod
    def update(self, room: Room) -> None:
        """客室を更新する"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, room_id: RoomId) -> None:
        """客室を削除する"""
        raise NotImplementedError
