from enum import Enum


class DateClassification(str, Enum):
    """カレンダー上の日付の状態"""

    PAST = "past"
    BOOKED = "booked"
    RESERVED = "reserved"
    AVAILABLE = "available"
