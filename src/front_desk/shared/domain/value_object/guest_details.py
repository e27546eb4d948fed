from dataclasses import dataclass


@dataclass(frozen=True)
class GuestDetails:
    """宿泊者情報（予約・宿泊登録で共通）"""

    name: str
    salutation: str = "Mr"
    mobile_no: str = ""
    email: str = ""
    address: str = ""
    city: str = ""
    nationality: str = "Indian"

    def __post_init__(self) -> None:
        if not self.name or len(self.name.strip()) == 0:
            raise ValueError("Guest name cannot be empty")
        if len(self.name) > 100:
            raise ValueError("Guest name is too long (max 100 characters)")

    def __str__(self) -> str:
        return f"{self.salutation} {self.name}".strip()
