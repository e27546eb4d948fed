from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from front_desk.category.domain import RoomCategory, RoomCategoryRepository
from front_desk.room.domain import Room, RoomRepository
from front_desk.room.domain.service import (
    AvailabilityPartition,
    partition_rooms,
    partition_rooms_for_stay,
)
from front_desk.shared.domain import StayPeriod

UNCATEGORIZED = "Uncategorized"


@dataclass(frozen=True)
class CategoryRoomGroup:
    """カテゴリ単位でまとめた客室"""

    category_id: str
    category: str
    rooms: list[Room]


@dataclass(frozen=True)
class AvailabilitySearchResult:
    query_date: date | None
    stay: StayPeriod | None
    available: list[CategoryRoomGroup]
    booked_or_reserved: list[CategoryRoomGroup]
    all_rooms: list[CategoryRoomGroup]

    @property
    def total_count(self) -> int:
        return sum(len(group.rooms) for group in self.all_rooms)

    @property
    def available_count(self) -> int:
        return sum(len(group.rooms) for group in self.available)


class SearchAvailableRoomsService:
    """空室検索のユースケース

    単日指定（query_date）と滞在期間指定（stay）のどちらかで振り分ける。
    """

    def __init__(
        self, repository: RoomRepository, category_repository: RoomCategoryRepository
    ) -> None:
        self._repository = repository
        self._category_repository = category_repository

    def search(
        self,
        query_date: date | None = None,
        stay: StayPeriod | None = None,
        today: date | None = None,
    ) -> AvailabilitySearchResult:
        rooms = self._repository.find_all()
        categories = {str(c.id): c for c in self._category_repository.find_all()}
        records = [room.availability_record() for room in rooms]

        if stay is not None and stay.check_in is not None:
            partition = partition_rooms_for_stay(records, stay)
        else:
            query_date = query_date or today or date.today()
            stay = None
            partition = partition_rooms(records, query_date)

        available, booked = self._split(rooms, partition)
        return AvailabilitySearchResult(
            query_date=query_date,
            stay=stay,
            available=_group_by_category(available, categories),
            booked_or_reserved=_group_by_category(booked, categories),
            all_rooms=_group_by_category(rooms, categories),
        )

    def _split(
        self, rooms: list[Room], partition: AvailabilityPartition
    ) -> tuple[list[Room], list[Room]]:
        by_id = {str(room.id): room for room in rooms}
        return (
            [by_id[record.room_id] for record in partition.available],
            [by_id[record.room_id] for record in partition.booked_or_reserved],
        )


def _group_by_category(
    rooms: Iterable[Room], categories: dict[str, RoomCategory]
) -> list[CategoryRoomGroup]:
    grouped: dict[str, list[Room]] = {}
    for room in rooms:
        grouped.setdefault(str(room.category_id), []).append(room)

    groups = [
        CategoryRoomGroup(
            category_id=category_id,
            category=str(categories[category_id].name)
            if category_id in categories
            else UNCATEGORIZED,
            rooms=sorted(members, key=lambda r: str(r.room_number)),
        )
        for category_id, members in grouped.items()
    ]
    return sorted(groups, key=lambda g: g.category.lower())
