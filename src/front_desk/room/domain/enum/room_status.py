from enum import Enum


class RoomStatus(str, Enum):
    """客室ステータス"""

    AVAILABLE = "available"
    BOOKED = "booked"
    RESERVED = "reserved"
    MAINTENANCE = "maintenance"
