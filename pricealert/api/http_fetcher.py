"""
Module for fetching spot prices via the CoinGecko HTTP REST API.
"""

import requests
import logging
import json
from decimal import Decimal
from typing import Any, Dict, Optional

from config import settings
from .exceptions import PriceUnavailableError

logger = logging.getLogger(__name__)

class CoinGeckoPriceFetcher:
    """
    Fetches the current spot price of a single asset from CoinGecko's
    ``/simple/price`` endpoint.

    Every failure is reported as ``None`` rather than raised, so callers treat
    an unavailable price as an ordinary outcome.

    Args:
        base_url (str): API base URL. Defaults to settings.PRICE_API_URL.
        vs_currency (str): Quote currency (e.g. 'usd'). Defaults to settings.VS_CURRENCY.
        timeout (float): Request timeout in seconds. Defaults to settings.REQUEST_TIMEOUT.
    """
    def __init__(self, base_url: Optional[str] = None, vs_currency: Optional[str] = None,
                 timeout: Optional[float] = None):
        self.base_url = (base_url or settings.PRICE_API_URL).rstrip("/")
        self.vs_currency = (vs_currency or settings.VS_CURRENCY).lower()
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT

    def get_spot_price(self, asset_id: str) -> Optional[Decimal]:
        """
        Fetches the current price of an asset in the configured quote currency.

        Args:
            asset_id (str): The CoinGecko coin id (e.g., 'solana', 'bitcoin').

        Returns:
            Optional[Decimal]: The positive spot price, or None on error.
        """
        url = f"{self.base_url}/simple/price"
        params = {"ids": asset_id, "vs_currencies": self.vs_currency}
        logger.debug(f"Fetching spot price from {url} with params: {params}")
        try:
            response = requests.get(url, params=params, timeout=self.timeout)
            response.raise_for_status() # Raise HTTPError for bad responses (4xx or 5xx)
            data = response.json(parse_float=Decimal)
            price = self.parse_price(data, asset_id, self.vs_currency)
            logger.info(f"Fetched {asset_id} price: {price} {self.vs_currency.upper()}")
            return price
        except requests.exceptions.RequestException as e:
            logger.error(f"Error fetching price for {asset_id}: {e}")
            return None
        except json.JSONDecodeError as e:
            logger.error(f"JSON Decode Error fetching price for {asset_id}: {e}")
            return None
        except PriceUnavailableError as e:
            logger.error(f"Error fetching price: {e}")
            return None
        except Exception as e:
            logger.exception(f"Unexpected error fetching price for {asset_id}: {e}")
            return None

    @staticmethod
    def parse_price(data: Any, asset_id: str, vs_currency: str) -> Decimal:
        """
        Extracts the price from a ``/simple/price`` response body.

        Expected shape: ``{"solana": {"usd": 142.37}}``.

        Args:
            data (Any): The decoded JSON body.
            asset_id (str): The coin id used as the outer key.
            vs_currency (str): The quote currency used as the inner key.

        Returns:
            Decimal: The price.

        Raises:
            PriceUnavailableError: If the body does not hold a positive number at the expected key.
        """
        if not isinstance(data, dict):
            raise PriceUnavailableError(asset_id, f"unexpected response type {type(data).__name__}")
        quotes: Optional[Dict[str, Any]] = data.get(asset_id)
        if not isinstance(quotes, dict):
            raise PriceUnavailableError(asset_id, f"'{asset_id}' key missing in response")
        if vs_currency not in quotes:
            raise PriceUnavailableError(asset_id, f"'{vs_currency}' key missing in response")

        value = quotes[vs_currency]
        # bool is an int subclass; a JSON true is not a price
        if isinstance(value, bool) or not isinstance(value, (int, Decimal)):
            raise PriceUnavailableError(asset_id, f"non-numeric price {value!r}")
        price = Decimal(value)
        if not price.is_finite() or price <= 0:
            raise PriceUnavailableError(asset_id, f"non-positive price {price}")
        return price
