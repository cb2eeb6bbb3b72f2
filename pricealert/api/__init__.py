"""
External API Interaction Package.

Provides the price API client and the messaging API client used by the
price watcher.
"""

from .exceptions import (
    PriceAlertError,
    PriceUnavailableError,
    NotificationError,
    MessagingAPIError,
)
from .http_fetcher import CoinGeckoPriceFetcher
from .messaging import TwilioMessenger

__all__ = [
    "PriceAlertError",
    "PriceUnavailableError",
    "NotificationError",
    "MessagingAPIError",
    "CoinGeckoPriceFetcher",
    "TwilioMessenger",
]
