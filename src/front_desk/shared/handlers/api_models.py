from __future__ import annotations

from datetime import date
from decimal import Decimal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from front_desk.shared.domain import GuestDetails, PriceBreakdown, StayPeriod
from front_desk.shared.domain.service import normalize_room_count
from front_desk.shared.utils import to_decimal


class CamelModel(BaseModel):
    """camelCase の JSON と snake_case の属性を相互変換する基底モデル"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_body(self) -> dict:
        """API レスポンス用の dict に変換する"""
        return self.model_dump(mode="json", by_alias=True)


class GuestDetailsData(CamelModel):
    """宿泊者情報のレスポンスモデル"""

    salutation: str
    name: str
    mobile_no: str
    email: str
    address: str
    city: str
    nationality: str

    @classmethod
    def from_value(cls, guest: GuestDetails) -> GuestDetailsData:
        return cls(
            salutation=guest.salutation,
            name=guest.name,
            mobile_no=guest.mobile_no,
            email=guest.email,
            address=guest.address,
            city=guest.city,
            nationality=guest.nationality,
        )


class StayData(CamelModel):
    check_in: date | None
    check_out: date | None
    days: int

    @classmethod
    def from_value(cls, stay: StayPeriod) -> StayData:
        return cls(check_in=stay.check_in, check_out=stay.check_out, days=stay.nights())


class PaymentDetailsData(CamelModel):
    """料金内訳のレスポンスモデル（小数点以下 2 桁に丸めて返す）"""

    currency: str
    rate: Decimal
    nights: int
    number_of_rooms: int
    discount_percent: Decimal
    subtotal: Decimal
    discount_amount: Decimal
    total_amount: Decimal
    advance_paid: Decimal
    balance_due: Decimal

    @classmethod
    def from_breakdown(
        cls,
        breakdown: PriceBreakdown,
        currency: str,
        rate: Decimal,
        discount_percent: Decimal,
        advance_paid: Decimal,
    ) -> PaymentDetailsData:
        rounded = breakdown.rounded()
        return cls(
            currency=currency,
            rate=rate,
            nights=rounded.nights,
            number_of_rooms=rounded.number_of_rooms,
            discount_percent=discount_percent,
            subtotal=rounded.subtotal,
            discount_amount=rounded.discount_amount,
            total_amount=rounded.total,
            advance_paid=advance_paid,
            balance_due=rounded.balance_due,
        )


def date_part(v: object) -> object:
    """ISO 日時文字列は日付部分だけを使う"""
    if isinstance(v, str):
        return v[:10] or None
    return v


class PricingFields(CamelModel):
    """料金計算の入力（予約・仮予約・見積もりで共通）"""

    check_in_date: date | None = Field(
        default=None, validation_alias=AliasChoices("checkInDate", "check_in_date")
    )
    check_out_date: date | None = Field(
        default=None, validation_alias=AliasChoices("checkOutDate", "check_out_date")
    )
    rate: Decimal | None = Field(default=None, ge=0, description="1泊あたりの料金")
    number_of_rooms: int = Field(
        default=1,
        validation_alias=AliasChoices("noOfRooms", "numberOfRooms", "number_of_rooms"),
    )
    discount_percent: Decimal = Field(default=Decimal("0"), ge=0, le=100)
    advance_paid: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        validation_alias=AliasChoices("advancePaid", "upfrontPayment", "advance_paid"),
    )

    @field_validator("check_in_date", "check_out_date", mode="before")
    @classmethod
    def strip_time(cls, v: object) -> object:
        return date_part(v)

    @field_validator("number_of_rooms", mode="before")
    @classmethod
    def default_room_count(cls, v: object) -> int:
        return normalize_room_count(v)

    @field_validator("rate", mode="before")
    @classmethod
    def convert_rate_to_decimal(cls, v: object) -> Decimal | None:
        if v is None or v == "":
            return None
        return to_decimal(v)

    @field_validator("discount_percent", "advance_paid", mode="before")
    @classmethod
    def convert_amount_to_decimal(cls, v: object) -> Decimal:
        if v is None or v == "":
            return Decimal("0")
        return to_decimal(v)

    def stay(self) -> StayPeriod:
        return StayPeriod(check_in=self.check_in_date, check_out=self.check_out_date)


class GuestFields(CamelModel):
    """宿泊者情報の入力"""

    salutation: str = Field(default="Mr", max_length=10)
    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        validation_alias=AliasChoices("guestName", "name"),
    )
    mobile_no: str = Field(
        default="", validation_alias=AliasChoices("mobileNo", "mobile_no", "phone")
    )
    email: str = ""
    address: str = ""
    city: str = ""
    nationality: str = "Indian"

    def guest_details(self) -> GuestDetails:
        return GuestDetails(
            name=self.name,
            salutation=self.salutation,
            mobile_no=self.mobile_no,
            email=self.email,
            address=self.address,
            city=self.city,
            nationality=self.nationality,
        )
