from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .currency import Currency


@dataclass(frozen=True)
class Money:
    """金額（通貨情報含む）"""

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    @classmethod
    def of(cls, amount: Decimal, currency_code: str | None = None) -> Money:
        """通貨コード指定（省略時はホテル既定通貨）で Money を生成"""
        currency = Currency(currency_code) if currency_code else Currency.default()
        return cls(amount, currency)

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        return cls(Decimal("0"), currency)
