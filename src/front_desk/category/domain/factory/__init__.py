from .room_category_factory import RoomCategoryFactory

__all__ = ["RoomCategoryFactory"]
