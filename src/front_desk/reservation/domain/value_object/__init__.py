from .reservation_id import ReservationId

__all__ = ["ReservationId"]
