from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class BookingId:
    """宿泊予約ID"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("BookingId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> BookingId:
        return cls(value=uuid.uuid4().hex)
