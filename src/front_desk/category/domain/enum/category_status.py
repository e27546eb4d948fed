from enum import Enum


class CategoryStatus(str, Enum):
    """客室カテゴリの公開ステータス"""

    ACTIVE = "Active"
    INACTIVE = "Inactive"
