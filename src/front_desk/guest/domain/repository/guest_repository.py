from abc import abstractmethod

from front_desk.guest.domain.entity import Guest
from front_desk.guest.domain.value_object import GrcNo
from front_desk.shared.domain import Repository


class GuestRepository(Repository[Guest, GrcNo]):
    """宿泊者リポジトリのインターフェース"""

    @abstractmethod
    def save(self, guest: Guest) -> None:
        """宿泊者を保存する（同じGRC番号は上書き）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, grc_no: GrcNo) -> Guest | None:
        """GRC番号で検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Guest]:
        """全宿泊者を氏名順に取得する"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, grc_no: GrcNo) -> None:
        """宿泊者を削除する"""
        raise NotImplementedError
