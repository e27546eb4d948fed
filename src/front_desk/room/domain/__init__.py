from .entity import Room
from .enum import DateClassification, RoomStatus
from .factory import RoomDetails, RoomFactory
from .repository import RoomRepository
from .value_object import RoomId, RoomNumber

__all__ = [
    "DateClassification",
    "Room",
    "RoomDetails",
    "RoomFactory",
    "RoomId",
    "RoomNumber",
    "RoomRepository",
    "RoomStatus",
]
