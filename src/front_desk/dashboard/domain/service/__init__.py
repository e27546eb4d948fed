from .revenue import RevenuePoint, is_revenue, revenue_series, total_revenue

__all__ = ["RevenuePoint", "is_revenue", "revenue_series", "total_revenue"]
