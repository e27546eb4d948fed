from collections.abc import Sequence
from datetime import date

from front_desk.room.domain import Room
from front_desk.room.domain.service import is_unavailable_on
from front_desk.shared.domain.exception import BusinessRuleViolationException


def hold_nights(room: Room, nights: Sequence[date]) -> None:
    """客室の指定日を仮押さえする（予約済み・仮押さえ済みの日があればエラー）"""
    record = room.availability_record()
    taken = [night for night in nights if is_unavailable_on(record, night)]
    if taken:
        raise BusinessRuleViolationException(
            f"Room {room.room_number} is not available on "
            + ", ".join(night.isoformat() for night in taken)
        )
    room.reserve_dates(nights)
