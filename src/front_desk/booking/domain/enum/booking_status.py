from enum import Enum


class BookingStatus(str, Enum):
    """宿泊予約ステータス"""

    BOOKED = "Booked"
    CHECKED_IN = "Checked In"
    CHECKED_OUT = "Checked Out"
    CANCELLED = "Cancelled"
