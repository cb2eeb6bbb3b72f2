# tests/test_price_change.py

"""Tests for the price movement model and message formatting."""

import unittest
from decimal import Decimal

from pricealert.models import (
    Direction,
    PriceChange,
    classify_direction,
    compute_diff_percent,
    format_change_message,
    format_startup_message,
)
from pricealert.models.price_change import round_2


class TestDiffPercent(unittest.TestCase):
    """Verify the percent change formula and direction rule."""

    def test_rise(self) -> None:
        """100 -> 105 is a 5% rise."""
        self.assertEqual(
            compute_diff_percent(Decimal("100"), Decimal("105")),
            Decimal("5"),
        )

    def test_drop(self) -> None:
        """100 -> 95 is a -5% move."""
        self.assertEqual(
            compute_diff_percent(Decimal("100"), Decimal("95")),
            Decimal("-5"),
        )

    def test_zero_change_is_rise(self) -> None:
        """An unchanged price is classified as RISE, not neutral."""
        change = PriceChange.from_prices(Decimal("42.5"), Decimal("42.5"))
        self.assertEqual(change.diff_percent, Decimal("0"))
        self.assertIs(change.direction, Direction.RISE)

    def test_small_negative_is_drop(self) -> None:
        """Any negative change, however small, is a DROP."""
        self.assertIs(
            classify_direction(Decimal("-0.0001")), Direction.DROP,
        )

    def test_previous_must_be_positive(self) -> None:
        """A zero baseline cannot produce a percentage."""
        with self.assertRaises(ValueError):
            compute_diff_percent(Decimal("0"), Decimal("10"))

    def test_direction_labels(self) -> None:
        """Labels carry the chart emoji used in messages."""
        self.assertEqual(Direction.RISE.label, "📈 RISE")
        self.assertEqual(Direction.DROP.label, "📉 DROP")


class TestRounding(unittest.TestCase):
    """Verify two-place rendering."""

    def test_rounds_half_up(self) -> None:
        """0.125 renders as 0.13."""
        self.assertEqual(round_2(Decimal("0.125")), "0.13")

    def test_pads_to_two_places(self) -> None:
        """Whole numbers get two decimals."""
        self.assertEqual(round_2(Decimal("105")), "105.00")

    def test_large_values_have_no_exponent(self) -> None:
        """Large prices render in plain notation."""
        self.assertEqual(round_2(Decimal("1E+5")), "100000.00")


class TestMessages(unittest.TestCase):
    """Verify notification texts."""

    def test_rise_message(self) -> None:
        """Scenario B text: RISE, $105.00, 5.00%."""
        change = PriceChange.from_prices(Decimal("100.00"), Decimal("105.00"))
        message = format_change_message("Solana", change)
        self.assertEqual(
            message,
            "Solana Hourly Update (📈 RISE)\n"
            "💰 Current Price: *$105.00*\n"
            "📊 Change: *5.00%* since last hour",
        )

    def test_drop_message(self) -> None:
        """Scenario C text: DROP, $95.00, -5.00%."""
        change = PriceChange.from_prices(Decimal("100.00"), Decimal("95.00"))
        message = format_change_message("Solana", change)
        self.assertIn("📉 DROP", message)
        self.assertIn("$95.00", message)
        self.assertIn("-5.00%", message)

    def test_non_hourly_wording(self) -> None:
        """Other intervals do not claim to be hourly."""
        change = PriceChange.from_prices(Decimal("10"), Decimal("11"))
        message = format_change_message("Bitcoin", change, interval_minutes=15)
        self.assertTrue(message.startswith("Bitcoin Price Update"))
        self.assertIn("since last check", message)
        self.assertNotIn("Hourly", message)

    def test_startup_message(self) -> None:
        """Startup text names the asset and the rounded price."""
        self.assertEqual(
            format_startup_message("Solana", Decimal("142.376")),
            "Server Started Successfully\n"
            "💰 Current Solana Price: *$142.38*",
        )


if __name__ == "__main__":
    unittest.main()
