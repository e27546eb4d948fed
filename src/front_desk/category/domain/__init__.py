from .entity import RoomCategory
from .enum import CategoryStatus
from .factory import RoomCategoryFactory
from .repository import RoomCategoryRepository
from .value_object import CategoryId, CategoryName

__all__ = [
    "CategoryId",
    "CategoryName",
    "CategoryStatus",
    "RoomCategory",
    "RoomCategoryFactory",
    "RoomCategoryRepository",
]
