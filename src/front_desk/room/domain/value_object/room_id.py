from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class RoomId:
    """客室ID"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("RoomId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> RoomId:
        return cls(value=uuid.uuid4().hex)
