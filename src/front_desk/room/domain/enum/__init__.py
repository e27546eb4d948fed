from .date_classification import DateClassification
from .room_status import RoomStatus

__all__ = ["DateClassification", "RoomStatus"]
