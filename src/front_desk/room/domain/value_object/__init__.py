from .room_id import RoomId
from .room_number import RoomNumber

__all__ = ["RoomId", "RoomNumber"]
