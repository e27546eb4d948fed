from __future__ import annotations

from datetime import date

from pydantic import Field

from front_desk.room.applications.search_available_rooms import CategoryRoomGroup
from front_desk.room.domain import Room
from front_desk.shared.handlers.api_models import CamelModel


class RoomData(CamelModel):
    """客室のレスポンスモデル"""

    id: str
    room_number: str
    title: str
    category_id: str
    price: str
    currency: str
    floor: int
    status: str
    is_oos: bool
    extra_bed: bool
    booked_till_date: date | None
    reserved_dates: list[date]

    @classmethod
    def from_entity(cls, room: Room) -> RoomData:
        return cls(
            id=str(room.id),
            room_number=str(room.room_number),
            title=room.title,
            category_id=str(room.category_id),
            price=str(room.price.amount),
            currency=str(room.price.currency),
            floor=room.floor,
            status=room.status.value,
            is_oos=room.is_oos,
            extra_bed=room.extra_bed,
            booked_till_date=room.booked_till_date,
            reserved_dates=room.reserved_dates,
        )


class RoomGroupData(CamelModel):
    """カテゴリ単位の客室グループ"""

    category_id: str
    category: str
    rooms: list[RoomData]

    @classmethod
    def from_group(cls, group: CategoryRoomGroup) -> RoomGroupData:
        return cls(
            category_id=group.category_id,
            category=group.category,
            rooms=[RoomData.from_entity(room) for room in group.rooms],
        )


class RoomResponse(CamelModel):
    success: bool = True
    room: RoomData


class RoomListResponse(CamelModel):
    success: bool = True
    rooms: list[RoomData]
    total_count: int


class AvailableRoomsResponse(CamelModel):
    success: bool = True
    query_date: date | None = None
    check_in_date: date | None = None
    check_out_date: date | None = None
    available_rooms: list[RoomGroupData]
    booked_rooms: list[RoomGroupData]
    all_rooms: list[RoomGroupData] | None = None
    available_count: int
    total_count: int


class CalendarDayData(CamelModel):
    day: date = Field(alias="date")
    status: str


class RoomCalendarResponse(CamelModel):
    success: bool = True
    room: RoomData
    year: int
    month: int
    days: list[CalendarDayData]
