from datetime import date

from front_desk.room.domain import DateClassification, Room, RoomId, RoomRepository
from front_desk.room.domain.service import month_calendar
from front_desk.shared.domain.exception import ResourceNotFoundException


class RoomCalendarService:
    """客室カレンダー（日付ごとの空き状況）のユースケース"""

    def __init__(self, repository: RoomRepository) -> None:
        self._repository = repository

    def month(
        self, room_id: RoomId, year: int, month: int, today: date
    ) -> tuple[Room, list[tuple[date, DateClassification]]]:
        if not 1 <= month <= 12:
            raise ValueError(f"Invalid month: {month}")

        room = self._repository.find_by_id(room_id)
        if room is None:
            raise ResourceNotFoundException(f"Room not found: {room_id}")
        return room, month_calendar(room.availability_record(), year, month, today)
