"""宿泊料金の計算

料金は入力のスナップショットから毎回すべて再計算する純粋関数で、
例外は送出しない。欠損・不正な入力は安全な既定値に丸め込む。

    subtotal        = rate × nights × rooms
    discount_amount = subtotal × discount% / 100
    total           = subtotal − discount_amount
    balance_due     = total − advance_paid   (負の値 = 過払い)

途中計算では丸めない。通貨単位への丸めは表示時に ``PriceBreakdown.rounded``
で行う。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import ROUND_HALF_UP, Decimal

from front_desk.shared.utils.validators import to_decimal

SECONDS_PER_DAY = 24 * 60 * 60
CENT = Decimal("0.01")
HUNDRED = Decimal("100")
ZERO = Decimal("0")


@dataclass(frozen=True)
class PriceBreakdown:
    """料金内訳"""

    nights: int
    number_of_rooms: int
    subtotal: Decimal
    discount_amount: Decimal
    total: Decimal
    balance_due: Decimal

    def rounded(self) -> PriceBreakdown:
        """表示用に小数点以下 2 桁へ丸めた内訳を返す"""
        return PriceBreakdown(
            nights=self.nights,
            number_of_rooms=self.number_of_rooms,
            subtotal=_round_currency(self.subtotal),
            discount_amount=_round_currency(self.discount_amount),
            total=_round_currency(self.total),
            balance_due=_round_currency(self.balance_due),
        )


def count_nights(
    check_in: date | datetime | None, check_out: date | datetime | None
) -> int:
    """宿泊数 = ceil(チェックアウト − チェックイン)[日]。1 未満なら 1"""
    if check_in is None or check_out is None:
        return 1

    start, end = _as_datetime(check_in), _as_datetime(check_out)
    if (start.tzinfo is None) != (end.tzinfo is None):
        start, end = start.replace(tzinfo=None), end.replace(tzinfo=None)

    nights = math.ceil((end - start).total_seconds() / SECONDS_PER_DAY)
    return nights if nights > 0 else 1


def normalize_room_count(value: object) -> int:
    """部屋数を正の整数にする（欠損・不正・0 以下は 1）"""
    if isinstance(value, bool):
        return 1
    try:
        count = int(_coerce_decimal(value, ZERO))
    except (ValueError, OverflowError):
        return 1
    return count if count >= 1 else 1


def calculate_price(
    base_rate: object,
    nights: int = 1,
    number_of_rooms: object = 1,
    discount_percent: object = 0,
    advance_paid: object = 0,
) -> PriceBreakdown:
    """料金内訳を依存順（小計 → 割引 → 合計 → 残高）に計算する"""
    rate = _coerce_decimal(base_rate, ZERO)
    nights = nights if isinstance(nights, int) and nights >= 1 else 1
    rooms = normalize_room_count(number_of_rooms)
    discount = min(max(_coerce_decimal(discount_percent, ZERO), ZERO), HUNDRED)
    advance = _coerce_decimal(advance_paid, ZERO)

    subtotal = rate * nights * rooms
    discount_amount = subtotal * discount / HUNDRED
    total = subtotal - discount_amount
    balance_due = total - advance

    return PriceBreakdown(
        nights=nights,
        number_of_rooms=rooms,
        subtotal=subtotal,
        discount_amount=discount_amount,
        total=total,
        balance_due=balance_due,
    )


def _as_datetime(value: date | datetime) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def _coerce_decimal(value: object, default: Decimal) -> Decimal:
    if value is None or value == "":
        return default
    try:
        result = to_decimal(value)
    except (ValueError, TypeError):
        return default
    return result if result.is_finite() else default


def _round_currency(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)
