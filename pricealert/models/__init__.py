"""
Data models representing price movements and the notification texts built from them.
"""
from .price_change import (
    Direction,
    PriceChange,
    compute_diff_percent,
    classify_direction,
    format_change_message,
    format_startup_message,
)

__all__ = [
    "Direction",
    "PriceChange",
    "compute_diff_percent",
    "classify_direction",
    "format_change_message",
    "format_startup_message",
]
