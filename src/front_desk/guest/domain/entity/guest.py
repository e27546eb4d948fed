from datetime import date

from front_desk.guest.domain.value_object import ContactDetails, GrcNo, VisitStats
from front_desk.shared.domain import AggregateRoot, GuestDetails


class Guest(AggregateRoot[GrcNo]):
    """宿泊者エンティティ（GRC番号で識別）"""

    def __init__(
        self,
        id: GrcNo,
        name: str,
        salutation: str = "Mr",
        contact: ContactDetails | None = None,
        visit_stats: VisitStats | None = None,
    ) -> None:
        super().__init__(id)
        self._name = name
        self._salutation = salutation
        self._contact = contact or ContactDetails()
        self._visit_stats = visit_stats or VisitStats()

    @property
    def name(self) -> str:
        return self._name

    @property
    def salutation(self) -> str:
        return self._salutation

    @property
    def contact(self) -> ContactDetails:
        return self._contact

    @property
    def visit_stats(self) -> VisitStats:
        return self._visit_stats

    def update_profile(self, details: GuestDetails) -> None:
        """予約時の入力で氏名・連絡先を最新化する"""
        self._name = details.name
        self._salutation = details.salutation
        self._contact = ContactDetails(
            phone=details.mobile_no,
            email=details.email,
            address=details.address,
            city=details.city,
            country=details.nationality,
        )

    def record_visit(self, visit_date: date) -> None:
        """来館を記録する"""
        self._visit_stats = self._visit_stats.add_visit(visit_date)

    def matches(self, term: str) -> bool:
        """氏名・電話番号・GRC番号の部分一致（大文字小文字を無視）"""
        needle = term.strip().lower()
        return any(
            needle in field.lower()
            for field in (self._name, self._contact.phone, str(self.id))
        )
