from __future__ import annotations

from front_desk.category.domain import RoomCategory
from front_desk.shared.handlers.api_models import CamelModel


class CategoryData(CamelModel):
    """客室カテゴリのレスポンスモデル"""

    id: str
    category: str
    status: str

    @classmethod
    def from_entity(cls, category: RoomCategory) -> CategoryData:
        return cls(
            id=str(category.id),
            category=str(category.name),
            status=category.status.value,
        )


class CategoryResponse(CamelModel):
    success: bool = True
    category: CategoryData


class CategoryListResponse(CamelModel):
    success: bool = True
    categories: list[CategoryData]
