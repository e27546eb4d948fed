from datetime import date
from decimal import Decimal, InvalidOperation


def to_decimal(v: object) -> Decimal:
    """任意の値を Decimal に変換する

    Pydantic の field_validator (mode="before") から呼び出すことを想定。
    すでに Decimal の場合はそのまま返し、それ以外は str 経由で変換する。
    数値として読めない値は ValueError（Pydantic が 400 の検証エラーにする）。
    """
    if isinstance(v, Decimal):
        return v
    try:
        return Decimal(str(v))
    except InvalidOperation as e:
        raise ValueError(f"Invalid number: {v}") from e


def parse_iso_date(value: str | None, field_name: str) -> date | None:
    """クエリ文字列の YYYY-MM-DD を date に変換する（空なら None）"""
    if not value:
        return None
    try:
        # 2024-07-01T00:00:00.000Z のような ISO 日時も日付部分だけ使う
        return date.fromisoformat(value[:10])
    except ValueError as e:
        raise ValueError(f"Invalid {field_name}: {value}") from e
