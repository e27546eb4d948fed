from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class CategoryId:
    """客室カテゴリID"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("CategoryId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> CategoryId:
        return cls(value=uuid.uuid4().hex)
