"""
Custom exceptions raised around the price API and messaging API calls.
"""

class PriceAlertError(Exception):
    """Base class for errors raised by the price alert bot."""


class PriceUnavailableError(PriceAlertError):
    """Raised when the price API response cannot be turned into a usable price."""
    def __init__(self, asset_id: str, reason: str):
        self.asset_id = asset_id
        self.reason = reason
        super().__init__(f"Price unavailable for {asset_id}: {reason}")


class NotificationError(PriceAlertError):
    """Base class for failures while delivering a notification."""


class MessagingAPIError(NotificationError):
    """Custom exception for errors returned by the messaging provider's API."""
    def __init__(self, error_data: dict, status_code: int = None):
        self.code = error_data.get('code')
        self.message = error_data.get('message', 'Unknown API error')
        self.more_info = error_data.get('more_info')
        self.status_code = status_code if status_code is not None else error_data.get('status')
        super().__init__(f"Messaging API Error {self.code} (HTTP {self.status_code}): {self.message}")

    def __str__(self):
        return f"MessagingAPIError(code={self.code}, status={self.status_code}, message='{self.message}')"
