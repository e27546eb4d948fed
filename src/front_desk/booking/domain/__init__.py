from .entity import Booking
from .enum import BookingStatus
from .factory import BookingDetails, BookingFactory
from .repository import BookingRepository
from .value_object import BookingId

__all__ = [
    "Booking",
    "BookingDetails",
    "BookingFactory",
    "BookingId",
    "BookingRepository",
    "BookingStatus",
]
