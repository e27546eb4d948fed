from .pricing import (
    PriceBreakdown,
    calculate_price,
    count_nights,
    normalize_room_count,
)

__all__ = [
    "PriceBreakdown",
    "calculate_price",
    "count_nights",
    "normalize_room_count",
]
