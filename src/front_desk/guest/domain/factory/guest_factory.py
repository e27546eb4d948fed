from front_desk.guest.domain.entity import Guest
from front_desk.guest.domain.value_object import GrcNo
from front_desk.shared.domain import GuestDetails


class GuestFactory:
    """宿泊者を生成するFactory"""

    def create(self, grc_no: GrcNo, details: GuestDetails) -> Guest:
        """予約入力から新規宿泊者を作成する（来館回数 0）"""
        guest = Guest(id=grc_no, name=details.name, salutation=details.salutation)
        guest.update_profile(details)
        return guest
