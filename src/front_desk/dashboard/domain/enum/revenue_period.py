from enum import Enum


class RevenuePeriod(str, Enum):
    """売上グラフの集計単位"""

    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
