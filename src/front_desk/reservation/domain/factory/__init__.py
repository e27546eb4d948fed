from .reservation_factory import (
    ReservationDetails,
    ReservationFactory,
    resolve_category,
    resolve_rate,
)

__all__ = [
    "ReservationDetails",
    "ReservationFactory",
    "resolve_category",
    "resolve_rate",
]
