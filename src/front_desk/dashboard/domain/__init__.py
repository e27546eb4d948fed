from .enum import RevenuePeriod
from .service import RevenuePoint, revenue_series, total_revenue

__all__ = ["RevenuePeriod", "RevenuePoint", "revenue_series", "total_revenue"]
