from dataclasses import dataclass


@dataclass(frozen=True)
class RoomNumber:
    """部屋番号（例: "101"）"""

    value: str

    def __post_init__(self) -> None:
        normalized = self.value.strip() if self.value else ""
        if not normalized:
            raise ValueError("Room number cannot be empty")
        if len(normalized) > 10:
            raise ValueError("Room number is too long (max 10 characters)")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
