from .reservation_status import ReservationStatus

__all__ = ["ReservationStatus"]
