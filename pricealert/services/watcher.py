"""
Price watcher: tracks the last observed price of one asset and notifies on
every scheduled check.
"""

import asyncio
import enum
import logging
from decimal import Decimal
from typing import Optional

from pricealert.models import PriceChange, format_change_message, format_startup_message
from pricealert.models.price_change import round_2

logger = logging.getLogger(__name__)


class WatcherState(enum.Enum):
    UNINITIALIZED = "UNINITIALIZED"  # No price recorded yet
    TRACKING = "TRACKING"            # Last price set, ticks compare against it


class PriceWatcher:
    """
    Owns the last observed price and decides what to send on each tick.

    The price source and notifier are blocking clients; their calls run in
    worker threads so the event loop stays free. Only one check runs at a
    time: a trigger that fires while a check is in flight is skipped.

    Args:
        price_source: Object with ``get_spot_price(asset_id) -> Optional[Decimal]``.
        notifier: Object with ``send_message(text) -> bool``.
        asset_id (str): Id passed to the price source (e.g. 'solana').
        asset_name (str): Display name used in messages (e.g. 'Solana').
        interval_minutes (int): Schedule interval, only used for message wording.
    """
    def __init__(self, price_source, notifier, asset_id: str, asset_name: str,
                 interval_minutes: int = 60):
        self.price_source = price_source
        self.notifier = notifier
        self.asset_id = asset_id
        self.asset_name = asset_name
        self.interval_minutes = interval_minutes

        self._last_price: Optional[Decimal] = None
        self._in_flight: bool = False

    # --- Properties ---

    @property
    def last_price(self) -> Optional[Decimal]:
        return self._last_price

    @property
    def state(self) -> WatcherState:
        return WatcherState.UNINITIALIZED if self._last_price is None else WatcherState.TRACKING

    @property
    def is_busy(self) -> bool:
        """True while a tick or the startup check is awaiting a network call."""
        return self._in_flight

    # --- Operations ---

    async def on_tick(self) -> Optional[PriceChange]:
        """
        Runs one scheduled check.

        Returns:
            Optional[PriceChange]: The change that was reported, or None when no
            change notification was produced (fetch failed, first reading, or
            skipped because another check was in flight).
        """
        if self._in_flight:
            logger.warning(f"Previous {self.asset_name} price check still running; skipping this tick.")
            return None

        self._in_flight = True
        try:
            current = await self._fetch_price()
            if current is None:
                logger.debug(f"{self.asset_name} price unavailable; tick is a no-op.")
                return None

            if self._last_price is None:
                self._last_price = current
                logger.info(f"Initial {self.asset_name} price set: ${current}")
                return None

            change = PriceChange.from_prices(self._last_price, current)
            logger.info(
                f"{self.asset_name} moved {round_2(change.diff_percent)}% "
                f"({change.direction.value}): ${self._last_price} -> ${current}"
            )
            message = format_change_message(self.asset_name, change, self.interval_minutes)
            await self._notify(message)
            # Baseline advances whether or not the message went out
            self._last_price = current
            return change
        finally:
            self._in_flight = False

    async def on_startup(self) -> bool:
        """
        Runs the one-off startup check: announces the current price and sets
        the baseline, without any change comparison.

        Returns:
            bool: True if a price was obtained and the baseline set.
        """
        if self._in_flight:
            logger.warning("A price check is already running; startup check skipped.")
            return False

        self._in_flight = True
        try:
            price = await self._fetch_price()
            if price is None:
                logger.warning("Startup message skipped (could not fetch price)")
                return False

            await self._notify(format_startup_message(self.asset_name, price))
            self._last_price = price
            logger.info("Startup message sent")
            return True
        finally:
            self._in_flight = False

    # --- Collaborator calls ---

    async def _fetch_price(self) -> Optional[Decimal]:
        try:
            return await asyncio.to_thread(self.price_source.get_spot_price, self.asset_id)
        except Exception as e:
            logger.exception(f"Price source raised while fetching {self.asset_id}: {e}")
            return None

    async def _notify(self, text: str) -> bool:
        try:
            sent = await asyncio.to_thread(self.notifier.send_message, text)
        except Exception as e:
            logger.error(f"Notification failed: {e}")
            return False
        if not sent:
            logger.warning(f"Notification for {self.asset_name} was not delivered.")
        return bool(sent)
