from decimal import Decimal

from pydantic import AliasChoices, Field, field_validator

from front_desk.room.domain import RoomDetails
from front_desk.shared.handlers.api_models import CamelModel
from front_desk.shared.utils import to_decimal


class RoomRequest(CamelModel):
    """客室の登録・更新リクエストモデル"""

    room_number: str = Field(
        ...,
        min_length=1,
        max_length=10,
        validation_alias=AliasChoices("room_number", "roomNumber"),
        description="部屋番号",
    )
    title: str = Field(default="", max_length=100)
    category_id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("category", "categoryId", "category_id"),
        description="客室カテゴリID",
    )
    price: Decimal = Field(..., ge=0, description="1泊あたりの料金")
    floor: int = Field(default=1, ge=0)
    is_oos: bool = Field(default=False, validation_alias=AliasChoices("is_oos", "isOos"))
    extra_bed: bool = Field(
        default=False, validation_alias=AliasChoices("extra_bed", "extraBed")
    )
    maintenance: bool | None = Field(
        default=None, description="true でメンテナンス開始、false で終了"
    )

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v: object) -> Decimal:
        return to_decimal(v)

    def to_details(self) -> RoomDetails:
        return {
            "room_number": self.room_number,
            "title": self.title,
            "category_id": self.category_id,
            "price_amount": self.price,
            "floor": self.floor,
            "is_oos": self.is_oos,
            "extra_bed": self.extra_bed,
        }
