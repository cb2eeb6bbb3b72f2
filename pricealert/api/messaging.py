"""
Module for sending notifications through the Twilio Messages REST API
(WhatsApp channel).
"""

import logging
import datetime
from typing import Optional

import requests

from config import settings
from .exceptions import MessagingAPIError

logger = logging.getLogger(__name__)

class TwilioMessenger:
    """
    Sends text messages from one fixed sender to one fixed recipient.

    Delivery is best-effort: provider errors are logged and swallowed, never
    retried and never raised to the caller.

    Args:
        account_sid (str): Twilio account SID, also the basic-auth username.
        auth_token (str): Twilio auth token.
        from_address (str): Sender address, e.g. 'whatsapp:+14155238886'.
        to_address (str): Recipient address.
        api_url (str): Base URL of the Twilio REST API.
        timeout (float): Request timeout in seconds.
        dry_run (bool): If True, log messages instead of sending them.
    """
    def __init__(self, account_sid: Optional[str] = None, auth_token: Optional[str] = None,
                 from_address: Optional[str] = None, to_address: Optional[str] = None,
                 api_url: Optional[str] = None, timeout: Optional[float] = None,
                 dry_run: Optional[bool] = None):
        self.account_sid = account_sid or settings.ACCOUNT_SID
        self.auth_token = auth_token or settings.AUTH_TOKEN
        self.from_address = from_address or settings.TWILIO_WHATSAPP
        self.to_address = to_address or settings.MY_WHATSAPP
        self.api_url = (api_url or settings.TWILIO_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self.dry_run = settings.NOTIFIER_DRY_RUN if dry_run is None else dry_run

        if not self.dry_run and not all([self.account_sid, self.auth_token,
                                         self.from_address, self.to_address]):
            raise ValueError("Account SID, auth token, sender and recipient are required unless dry_run is set.")

    @property
    def messages_url(self) -> str:
        return f"{self.api_url}/2010-04-01/Accounts/{self.account_sid}/Messages.json"

    def send_message(self, text: str) -> bool:
        """
        Sends one message to the configured recipient.

        Args:
            text (str): Message body. Must not be empty.

        Returns:
            bool: True if the provider accepted the message (or dry run), False otherwise.
        """
        if not text or not text.strip():
            logger.error("Refusing to send an empty message.")
            return False

        if self.dry_run:
            logger.info(f"[DRY RUN] Would send message to {self.to_address}:\n{text}")
            return True

        try:
            sid = self._create_message(text)
            time_str = datetime.datetime.now().strftime("%H:%M:%S")
            logger.info(f"Message sent at {time_str} (sid: {sid})")
            return True
        except MessagingAPIError as e:
            logger.error(f"Error sending WhatsApp message: {e.message} (code {e.code}, HTTP {e.status_code})")
            return False
        except requests.exceptions.RequestException as e:
            # Do not log the request itself, the URL carries the account SID
            logger.error(f"Error sending WhatsApp message: {type(e).__name__}")
            return False
        except Exception as e:
            logger.exception(f"Unexpected error sending WhatsApp message: {e}")
            return False

    def _create_message(self, text: str) -> Optional[str]:
        """POSTs to the Messages resource and returns the new message SID."""
        payload = {
            "From": self.from_address,
            "To": self.to_address,
            "Body": text,
        }
        response = requests.post(
            self.messages_url,
            data=payload,
            auth=(self.account_sid, self.auth_token),
            timeout=self.timeout,
        )
        if not response.ok:
            try:
                error_data = response.json()
            except ValueError:
                error_data = {"message": response.text or response.reason}
            if not isinstance(error_data, dict):
                error_data = {"message": str(error_data)}
            raise MessagingAPIError(error_data, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError:
            return None
        return data.get("sid") if isinstance(data, dict) else None
