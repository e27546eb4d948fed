from abc import abstractmethod

from front_desk.booking.domain.entity import Booking
from front_desk.booking.domain.enum import BookingStatus
from front_desk.booking.domain.value_object import BookingId
from front_desk.room.domain.value_object import RoomId
from front_desk.shared.domain import Repository


class BookingRepository(Repository[Booking, BookingId]):
    """宿泊予約リポジトリのインターフェース"""

    @abstractmethod
    def save(self, booking: Booking) -> None:
        """予約を新規保存する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Booking]:
        """全予約を新しい順に取得する"""
        raise NotImplementedError

    @abstractmethod
    def find_active_by_room(self, room_id: RoomId) -> list[Booking]:
        """客室を押さえている有効な予約を取得する"""
        raise NotImplementedError

    @abstractmethod
    def update(
        self, booking: Booking, expected_status: BookingStatus | None = None
    ) -> None:
        """予約を更新する（expected_status 指定時は楽観ロック）"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, booking_id: BookingId) -> None:
        """予約を削除する"""
        raise NotImplementedError
