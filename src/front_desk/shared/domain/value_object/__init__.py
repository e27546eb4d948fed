from .currency import Currency
from .guest_details import GuestDetails
from .money import Money
from .stay_period import StayPeriod

__all__ = ["Currency", "GuestDetails", "Money", "StayPeriod"]
