from dataclasses import dataclass


@dataclass(frozen=True)
class ContactDetails:
    """連絡先"""

    phone: str = ""
    email: str = ""
    address: str = ""
    city: str = ""
    country: str = ""
