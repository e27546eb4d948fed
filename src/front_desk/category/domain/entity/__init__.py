from .room_category import RoomCategory

__all__ = ["RoomCategory"]
