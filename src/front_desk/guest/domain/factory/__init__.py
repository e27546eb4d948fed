from .guest_factory import GuestFactory

__all__ = ["GuestFactory"]
