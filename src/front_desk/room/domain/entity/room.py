from collections.abc import Iterable
from datetime import date

from front_desk.category.domain import CategoryId
from front_desk.room.domain.enum import RoomStatus
from front_desk.room.domain.service import RoomAvailabilityRecord
from front_desk.room.domain.value_object import RoomId, RoomNumber
from front_desk.shared.domain import AggregateRoot, Money
from front_desk.shared.domain.exception import BusinessRuleViolationException


class Room(AggregateRoot[RoomId]):
    """客室エンティティ"""

    def __init__(
        self,
        id: RoomId,
        room_number: RoomNumber,
        title: str,
        category_id: CategoryId,
        price: Money,
        floor: int = 1,
        status: RoomStatus = RoomStatus.AVAILABLE,
        is_oos: bool = False,
        extra_bed: bool = False,
        booked_till_date: date | None = None,
        reserved_dates: Iterable[date] = (),
    ) -> None:
        super().__init__(id)
        self._room_number = room_number
        self._title = title
        self._category_id = category_id
        self._price = price
        self._floor = floor
        self._status = status
        self._is_oos = is_oos
        self._extra_bed = extra_bed
        self._booked_till_date = booked_till_date
        self._reserved_dates: set[date] = set(reserved_dates)

    @property
    def room_number(self) -> RoomNumber:
        return self._room_number

    @property
    def title(self) -> str:
        return self._title

    @property
    def category_id(self) -> CategoryId:
        return self._category_id

    @property
    def price(self) -> Money:
        return self._price

    @property
    def floor(self) -> int:
        return self._floor

    @property
    def status(self) -> RoomStatus:
        return self._status

    @property
    def is_oos(self) -> bool:
        """out of service（販売停止中）"""
        return self._is_oos

    @property
    def extra_bed(self) -> bool:
        return self._extra_bed

    @property
    def booked_till_date(self) -> date | None:
        return self._booked_till_date

    @property
    def reserved_dates(self) -> list[date]:
        return sorted(self._reserved_dates)

    @property
    def is_sellable(self) -> bool:
        return not self._is_oos and self._status != RoomStatus.MAINTENANCE

    def update_details(
        self,
        room_number: RoomNumber,
        title: str,
        category_id: CategoryId,
        price: Money,
        floor: int,
        is_oos: bool,
        extra_bed: bool,
    ) -> None:
        """客室の基本情報を更新する"""
        self._room_number = room_number
        self._title = title
        self._category_id = category_id
        self._price = price
        self._floor = floor
        self._is_oos = is_oos
        self._extra_bed = extra_bed

    def start_maintenance(self) -> None:
        """メンテナンス中にする"""
        if self._status == RoomStatus.BOOKED:
            raise BusinessRuleViolationException(
                f"Room {self._room_number} is booked and cannot go into maintenance"
            )
        self._status = RoomStatus.MAINTENANCE

    def finish_maintenance(self) -> None:
        """メンテナンスを終了する"""
        if self._status == RoomStatus.MAINTENANCE:
            self._status = self._resting_status()

    def book_until(self, last_night: date) -> None:
        """最終宿泊日まで予約済みにする"""
        if not self.is_sellable:
            raise BusinessRuleViolationException(
                f"Room {self._room_number} is not available for sale"
            )
        self._booked_till_date = last_night
        self._status = RoomStatus.BOOKED

    def keep_booked_until(self, last_night: date) -> None:
        """残っている予約に合わせて予約済みの最終日を付け直す"""
        self._booked_till_date = last_night
        if self._status != RoomStatus.MAINTENANCE:
            self._status = RoomStatus.BOOKED

    def release_booking(self) -> None:
        """予約済みを解除する（チェックアウト・キャンセル時）"""
        self._booked_till_date = None
        if self._status == RoomStatus.BOOKED:
            self._status = self._resting_status()

    def reserve_dates(self, dates: Iterable[date]) -> None:
        """仮押さえ日を追加する"""
        if not self.is_sellable:
            raise BusinessRuleViolationException(
                f"Room {self._room_number} is not available for sale"
            )
        self._reserved_dates.update(dates)
        if self._status == RoomStatus.AVAILABLE and self._reserved_dates:
            self._status = RoomStatus.RESERVED

    def release_dates(self, dates: Iterable[date]) -> None:
        """仮押さえ日を解除する"""
        self._reserved_dates.difference_update(dates)
        if self._status == RoomStatus.RESERVED and not self._reserved_dates:
            self._status = RoomStatus.AVAILABLE

    def availability_record(self) -> RoomAvailabilityRecord:
        """空室判定用のレコードに変換する"""
        return RoomAvailabilityRecord(
            room_id=str(self.id),
            booked_till_date=self._booked_till_date,
            reserved_dates=frozenset(self._reserved_dates),
            status=self._status,
        )

    def _resting_status(self) -> RoomStatus:
        return RoomStatus.RESERVED if self._reserved_dates else RoomStatus.AVAILABLE
