from .room_factory import RoomDetails, RoomFactory

__all__ = ["RoomDetails", "RoomFactory"]
