from datetime import date

from front_desk.guest.domain import GrcNo, Guest, GuestFactory, GuestRepository
from front_desk.shared.domain import GuestDetails


class RegisterGuestVisitService:
    """宿泊登録時に宿泊者台帳を更新するユースケース"""

    def __init__(self, repository: GuestRepository, factory: GuestFactory) -> None:
        self._repository = repository
        self._factory = factory

    def register(self, grc_no: GrcNo, details: GuestDetails, visit_date: date) -> Guest:
        """既存の宿泊者なら情報を更新し、いなければ作成して来館を記録する"""
        guest = self._repository.find_by_id(grc_no)
        if guest is None:
            guest = self._factory.create(grc_no, details)
        else:
            guest.update_profile(details)

        guest.record_visit(visit_date)
        self._repository.save(guest)
        return guest
