from decimal import Decimal
from typing import TypedDict

from front_desk.category.domain import CategoryId
from front_desk.room.domain.entity import Room
from front_desk.room.domain.enum import RoomStatus
from front_desk.room.domain.value_object import RoomId, RoomNumber
from front_desk.shared.domain import Money


class RoomDetails(TypedDict):
    """客室の入力データ"""

    room_number: str
    title: str
    category_id: str
    price_amount: Decimal
    floor: int
    is_oos: bool
    extra_bed: bool


class RoomFactory:
    """客室を生成するFactory"""

    def create(self, room_details: RoomDetails) -> Room:
        """新規客室のエンティティを作成する"""
        return Room(
            id=RoomId.generate(),
            room_number=RoomNumber(room_details["room_number"]),
            title=room_details["title"],
            category_id=CategoryId(room_details["category_id"]),
            price=Money.of(room_details["price_amount"]),
            floor=room_details["floor"],
            status=RoomStatus.AVAILABLE,
            is_oos=room_details["is_oos"],
            extra_bed=room_details["extra_bed"],
        )
