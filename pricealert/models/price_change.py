"""
Defines the price movement value types and the message texts built from them.
"""

import enum
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

TWO_PLACES = Decimal("0.01")


class Direction(enum.Enum):
    """Direction of a price move. A zero change counts as a RISE."""
    RISE = "RISE"
    DROP = "DROP"

    @property
    def label(self) -> str:
        return "📈 RISE" if self is Direction.RISE else "📉 DROP"


def compute_diff_percent(previous: Decimal, current: Decimal) -> Decimal:
    """
    Percent change from ``previous`` to ``current``.

    Raises:
        ValueError: If previous is not positive.
    """
    if previous <= 0:
        raise ValueError(f"Previous price must be positive, got {previous}")
    return (current - previous) / previous * 100


def classify_direction(diff_percent: Decimal) -> Direction:
    return Direction.RISE if diff_percent >= 0 else Direction.DROP


def round_2(value: Decimal) -> str:
    """Rounds to 2 decimal places (half up) and renders without exponent."""
    return format(Decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP), "f")


@dataclass(frozen=True)
class PriceChange:
    """
    A comparison between the last recorded price and a fresh reading.

    Attributes:
        previous (Decimal): The baseline price (LastPrice before the tick).
        current (Decimal): The freshly fetched price.
        diff_percent (Decimal): (current - previous) / previous * 100.
        direction (Direction): RISE when diff_percent >= 0, else DROP.
    """
    previous: Decimal
    current: Decimal
    diff_percent: Decimal
    direction: Direction

    @classmethod
    def from_prices(cls, previous: Decimal, current: Decimal) -> "PriceChange":
        diff_percent = compute_diff_percent(previous, current)
        return cls(
            previous=previous,
            current=current,
            diff_percent=diff_percent,
            direction=classify_direction(diff_percent),
        )


def format_change_message(asset_name: str, change: PriceChange, interval_minutes: int = 60) -> str:
    """
    Builds the periodic update message.

    Hourly schedules keep the "Hourly Update" / "since last hour" wording,
    any other interval says "Price Update" / "since last check".
    """
    if interval_minutes == 60:
        title, since = f"{asset_name} Hourly Update", "since last hour"
    else:
        title, since = f"{asset_name} Price Update", "since last check"
    return (
        f"{title} ({change.direction.label})\n"
        f"💰 Current Price: *${round_2(change.current)}*\n"
        f"📊 Change: *{round_2(change.diff_percent)}%* {since}"
    )


def format_startup_message(asset_name: str, price: Decimal) -> str:
    return (
        "Server Started Successfully\n"
        f"💰 Current {asset_name} Price: *${round_2(price)}*"
    )
