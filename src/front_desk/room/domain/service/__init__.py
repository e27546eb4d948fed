from .availability import (
    AvailabilityPartition,
    RoomAvailabilityRecord,
    classify_date,
    is_unavailable_during,
    is_unavailable_on,
    month_calendar,
    partition_rooms,
    partition_rooms_for_stay,
)

__all__ = [
    "AvailabilityPartition",
    "RoomAvailabilityRecord",
    "classify_date",
    "is_unavailable_during",
    "is_unavailable_on",
    "month_calendar",
    "partition_rooms",
    "partition_rooms_for_stay",
]
