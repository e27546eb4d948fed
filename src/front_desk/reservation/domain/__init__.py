from .entity import Reservation
from .enum import ReservationStatus
from .factory import (
    ReservationDetails,
    ReservationFactory,
    resolve_category,
    resolve_rate,
)
from .repository import ReservationRepository
from .value_object import ReservationId

__all__ = [
    "Reservation",
    "ReservationDetails",
    "ReservationFactory",
    "ReservationId",
    "ReservationRepository",
    "ReservationStatus",
    "resolve_category",
    "resolve_rate",
]
