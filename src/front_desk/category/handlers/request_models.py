from pydantic import Field

from front_desk.category.domain import CategoryStatus
from front_desk.shared.handlers.api_models import CamelModel


class CategoryRequest(CamelModel):
    """客室カテゴリの登録・更新リクエストモデル"""

    category: str = Field(..., min_length=1, max_length=100, description="カテゴリ名")
    status: CategoryStatus = Field(default=CategoryStatus.ACTIVE)
