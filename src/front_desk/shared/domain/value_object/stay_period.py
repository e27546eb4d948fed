from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

from front_desk.shared.domain.service.pricing import count_nights


@dataclass(frozen=True)
class StayPeriod:
    """滞在期間(チェックイン日 + チェックアウト日)

    チェックアウトがチェックイン以前でもエラーにはせず、1泊として扱う。
    """

    check_in: date | None
    check_out: date | None

    @classmethod
    def from_iso(cls, check_in: str | None, check_out: str | None) -> StayPeriod:
        """YYYY-MM-DD 形式の文字列から生成する"""
        try:
            check_in_date = date.fromisoformat(check_in) if check_in else None
            check_out_date = date.fromisoformat(check_out) if check_out else None
        except ValueError as e:
            raise ValueError(f"Invalid date format: {e}") from e
        return cls(check_in=check_in_date, check_out=check_out_date)

    def nights(self) -> int:
        """宿泊数を計算する（常に 1 以上）"""
        return count_nights(self.check_in, self.check_out)

    def each_night(self) -> list[date]:
        """宿泊する各夜の日付"""
        if self.check_in is None:
            return []
        return [self.check_in + timedelta(days=i) for i in range(self.nights())]

    def last_night(self) -> date | None:
        """最終宿泊日（チェックアウト前日、チェックイン日より前にはならない）"""
        nights = self.each_night()
        return nights[-1] if nights else None
