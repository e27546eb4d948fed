"""客室の空室判定

- 予約済み(booked): ``booked_till_date`` があり、対象日 <= ``booked_till_date``
- 仮押さえ(reserved): 対象日（時刻は無視）が ``reserved_dates`` のいずれかと一致

空室一覧への振り分けではステータスが日付判定より優先される。
``available`` のステータスを持つ部屋は日付に関係なく空室側に入り、
``booked`` のステータスを持つ部屋は日付が空いていても空室にはならない。
"""

from __future__ import annotations

import calendar
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, datetime

from front_desk.room.domain.enum import DateClassification, RoomStatus
from front_desk.shared.domain import StayPeriod


@dataclass(frozen=True)
class RoomAvailabilityRecord:
    """部屋ごとの既知の利用不可情報"""

    room_id: str
    booked_till_date: date | None = None
    reserved_dates: frozenset[date] = field(default_factory=frozenset)
    status: RoomStatus | None = None


@dataclass(frozen=True)
class AvailabilityPartition:
    """空室 / 予約済み・仮押さえ の 2 グループ（入力の全件を過不足なく含む）"""

    available: list[RoomAvailabilityRecord]
    booked_or_reserved: list[RoomAvailabilityRecord]


def is_booked_on(record: RoomAvailabilityRecord, day: date | datetime) -> bool:
    if record.booked_till_date is None:
        return False
    return _as_date(day) <= record.booked_till_date


def is_reserved_on(record: RoomAvailabilityRecord, day: date | datetime) -> bool:
    return _as_date(day) in record.reserved_dates


def is_unavailable_on(record: RoomAvailabilityRecord, day: date | datetime) -> bool:
    """日付だけで判定した利用不可（予約済み または 仮押さえ）"""
    return is_booked_on(record, day) or is_reserved_on(record, day)


def is_unavailable_during(record: RoomAvailabilityRecord, stay: StayPeriod) -> bool:
    """滞在期間中のいずれかの夜が利用不可か"""
    return any(is_unavailable_on(record, night) for night in stay.each_night())


def partition_rooms(
    records: Iterable[RoomAvailabilityRecord], query_date: date | datetime
) -> AvailabilityPartition:
    """対象日で部屋を 空室 / 予約済み・仮押さえ に振り分ける"""
    return _partition(records, lambda record: is_unavailable_on(record, query_date))


def partition_rooms_for_stay(
    records: Iterable[RoomAvailabilityRecord], stay: StayPeriod
) -> AvailabilityPartition:
    """滞在期間の全泊で部屋を振り分ける"""
    return _partition(records, lambda record: is_unavailable_during(record, stay))


def classify_date(
    record: RoomAvailabilityRecord, day: date | datetime, today: date
) -> DateClassification:
    """カレンダーの 1 マスを分類する（past → booked → reserved → available の順）"""
    day = _as_date(day)
    if day < today:
        return DateClassification.PAST
    if is_booked_on(record, day):
        return DateClassification.BOOKED
    if is_reserved_on(record, day):
        return DateClassification.RESERVED
    return DateClassification.AVAILABLE


def month_calendar(
    record: RoomAvailabilityRecord, year: int, month: int, today: date
) -> list[tuple[date, DateClassification]]:
    """指定月の全日付を分類する"""
    _, last_day = calendar.monthrange(year, month)
    days = (date(year, month, d) for d in range(1, last_day + 1))
    return [(day, classify_date(record, day, today)) for day in days]


def _partition(records, unavailable) -> AvailabilityPartition:
    available: list[RoomAvailabilityRecord] = []
    booked_or_reserved: list[RoomAvailabilityRecord] = []

    for record in records:
        if record.status == RoomStatus.AVAILABLE or (
            not unavailable(record) and record.status != RoomStatus.BOOKED
        ):
            available.append(record)
        else:
            booked_or_reserved.append(record)

    return AvailabilityPartition(available=available, booked_or_reserved=booked_or_reserved)


def _as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value
