from .room_category_repository import RoomCategoryRepository

__all__ = ["RoomCategoryRepository"]
