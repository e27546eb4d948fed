from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class ReservationId:
    """仮予約ID"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("ReservationId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> ReservationId:
        return cls(value=uuid.uuid4().hex)
