from enum import Enum


class ReservationStatus(str, Enum):
    """仮予約ステータス"""

    CONFIRMED = "Confirmed"
    TENTATIVE = "Tentative"
    WAITING = "Waiting"
    CANCELLED = "Cancelled"
