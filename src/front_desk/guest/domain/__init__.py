from .entity import Guest
from .factory import GuestFactory
from .repository import GuestRepository
from .value_object import ContactDetails, GrcNo, VisitStats

__all__ = [
    "ContactDetails",
    "GrcNo",
    "Guest",
    "GuestFactory",
    "GuestRepository",
    "VisitStats",
]
