from .revenue_period import RevenuePeriod

__all__ = ["RevenuePeriod"]
