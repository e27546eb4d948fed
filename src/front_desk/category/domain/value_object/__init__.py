from .category_id import CategoryId
from .category_name import CategoryName

__all__ = ["CategoryId", "CategoryName"]
