from dataclasses import dataclass


@dataclass(frozen=True)
class GrcNo:
    """宿泊者登録カード番号（Guest Registration Card）"""

    value: str

    def __post_init__(self) -> None:
        normalized = self.value.strip() if self.value else ""
        if not normalized:
            raise ValueError("GRC number cannot be empty")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
