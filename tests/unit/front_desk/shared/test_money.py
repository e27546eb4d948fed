from decimal import Decimal

import pytest

from front_desk.shared.domain import Currency, Money


class TestMoney:
    def test_negative_amount_is_rejected(self):
        with pytest.raises(ValueError):
            Money.of(Decimal("-1"), "INR")

    def test_of_uses_hotel_currency(self, monkeypatch):
        monkeypatch.setenv("HOTEL_CURRENCY", "usd")
        assert Money.of(Decimal("10")).currency == Currency("USD")

    def test_hotel_currency_defaults_to_inr(self, monkeypatch):
        monkeypatch.delenv("HOTEL_CURRENCY", raising=False)
        assert Money.of(Decimal("10")).currency == Currency.inr()

    def test_zero(self):
        assert Money.zero(Currency("USD")) == Money.of(Decimal("0"), "USD")

    def test_unsupported_currency(self):
        with pytest.raises(ValueError, match="Unsupported currency"):
            Currency("JPY")
