from __future__ import annotations

from datetime import date

from front_desk.guest.domain import Guest
from front_desk.shared.handlers.api_models import CamelModel


class ContactDetailsData(CamelModel):
    phone: str
    email: str
    address: str
    city: str
    country: str


class VisitStatsData(CamelModel):
    total_visits: int
    last_visit: date | None


class GuestData(CamelModel):
    """宿泊者のレスポンスモデル"""

    grc_no: str
    salutation: str
    name: str
    contact_details: ContactDetailsData
    visit_stats: VisitStatsData

    @classmethod
    def from_entity(cls, guest: Guest) -> GuestData:
        return cls(
            grc_no=str(guest.id),
            salutation=guest.salutation,
            name=guest.name,
            contact_details=ContactDetailsData(
                phone=guest.contact.phone,
                email=guest.contact.email,
                address=guest.contact.address,
                city=guest.contact.city,
                country=guest.contact.country,
            ),
            visit_stats=VisitStatsData(
                total_visits=guest.visit_stats.total_visits,
                last_visit=guest.visit_stats.last_visit,
            ),
        )


class GuestResponse(CamelModel):
    success: bool = True
    guest: GuestData


class GuestListResponse(CamelModel):
    success: bool = True
    guests: list[GuestData]
    total: int
    page: int
    pages: int
