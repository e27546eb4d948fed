from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from front_desk.shared.domain.service import (
    calculate_price,
    count_nights,
    normalize_room_count,
)


class TestCountNights:
    def test_whole_days_between_dates(self):
        assert count_nights(date(2024, 7, 1), date(2024, 7, 3)) == 2

    @pytest.mark.parametrize(
        "check_in, check_out",
        [
            (date(2024, 7, 1), date(2024, 7, 1)),
            (date(2024, 7, 3), date(2024, 7, 1)),
            (None, date(2024, 7, 1)),
            (date(2024, 7, 1), None),
            (None, None),
        ],
    )
    def test_falls_back_to_one_night(self, check_in, check_out):
        assert count_nights(check_in, check_out) == 1

    def test_partial_day_rounds_up(self):
        check_in = datetime(2024, 7, 1, 14, 0)
        check_out = datetime(2024, 7, 3, 10, 0)
        assert count_nights(check_in, check_out) == 2

    def test_mixed_timezone_awareness_is_compared_naively(self):
        check_in = datetime(2024, 7, 1, tzinfo=timezone.utc)
        assert count_nights(check_in, date(2024, 7, 4)) == 3


class TestNormalizeRoomCount:
    @pytest.mark.parametrize("value", [None, "", "abc", 0, -2, True, float("nan")])
    def test_invalid_counts_become_one(self, value):
        assert normalize_room_count(value) == 1

    @pytest.mark.parametrize("value, expected", [(2, 2), ("3", 3), (Decimal("4"), 4)])
    def test_valid_counts_are_kept(self, value, expected):
        assert normalize_room_count(value) == expected


class TestCalculatePrice:
    def test_two_rooms_three_nights_with_discount_and_advance(self):
        breakdown = calculate_price(
            base_rate=Decimal("1000"),
            nights=3,
            number_of_rooms=2,
            discount_percent=Decimal("10"),
            advance_paid=Decimal("500"),
        )

        assert breakdown.subtotal == Decimal("6000")
        assert breakdown.discount_amount == Decimal("600")
        assert breakdown.total == Decimal("5400")
        assert breakdown.balance_due == Decimal("4900")

    def test_zero_discount_keeps_subtotal(self):
        breakdown = calculate_price(base_rate=Decimal("1500"), nights=2)

        assert breakdown.discount_amount == Decimal("0")
        assert breakdown.total == breakdown.subtotal == Decimal("3000")
        assert breakdown.balance_due == Decimal("3000")

    def test_full_discount_makes_total_zero(self):
        breakdown = calculate_price(
            base_rate=Decimal("2000"), nights=2, discount_percent=Decimal("100")
        )
        assert breakdown.total == Decimal("0")

    def test_overpayment_gives_negative_balance(self):
        breakdown = calculate_price(
            base_rate=Decimal("1000"), nights=1, advance_paid=Decimal("1500")
        )
        assert breakdown.balance_due == Decimal("-500")

    def test_discount_is_clamped_to_percent_range(self):
        over = calculate_price(base_rate=Decimal("1000"), discount_percent=150)
        under = calculate_price(base_rate=Decimal("1000"), discount_percent=-20)

        assert over.total == Decimal("0")
        assert under.total == Decimal("1000")

    def test_missing_inputs_use_defaults(self):
        breakdown = calculate_price(
            base_rate="", nights=0, number_of_rooms=None, advance_paid=None
        )

        assert breakdown.nights == 1
        assert breakdown.number_of_rooms == 1
        assert breakdown.total == Decimal("0")

    def test_same_day_stay_is_priced_as_one_night(self):
        nights = count_nights(date(2024, 7, 1), date(2024, 7, 1))
        breakdown = calculate_price(base_rate=Decimal("1800"), nights=nights)
        assert breakdown.total == Decimal("1800")

    def test_no_intermediate_rounding(self):
        breakdown = calculate_price(
            base_rate=Decimal("333.335"), nights=3, discount_percent=Decimal("12.5")
        )

        assert breakdown.subtotal == Decimal("1000.005")
        assert breakdown.discount_amount == Decimal("125.000625")
        assert breakdown.total == Decimal("875.004375")

    def test_rounded_uses_half_up_to_cents(self):
        breakdown = calculate_price(base_rate=Decimal("0.125"), nights=1).rounded()

        assert breakdown.subtotal == Decimal("0.13")
        assert breakdown.total == Decimal("0.13")

    def test_recalculation_is_deterministic(self):
        first = calculate_price(Decimal("999.99"), 4, 3, Decimal("7.5"), Decimal("100"))
        second = calculate_price(Decimal("999.99"), 4, 3, Decimal("7.5"), Decimal("100"))
        assert first == second

    def test_date_change_rederives_all_amounts(self):
        check_in = date(2024, 7, 1)
        before = calculate_price(
            Decimal("1000"), count_nights(check_in, check_in + timedelta(days=2))
        )
        after = calculate_price(
            Decimal("1000"), count_nights(check_in, check_in + timedelta(days=4))
        )

        assert (before.nights, after.nights) == (2, 4)
        assert after.total == before.total * 2
