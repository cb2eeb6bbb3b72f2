"""
Configuration settings for the Price Alert Bot.

Loads credentials and addresses for the messaging provider from environment
variables. Defines application constants.
"""

import os
import logging
from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

# --- Load environment variables from .env file ---
# Determine project root directory (assumes config/settings.py is 2 levels below root)
current_file_dir = os.path.dirname(os.path.abspath(__file__))          # .../price-alert-bot/config
project_root = os.path.abspath(os.path.join(current_file_dir, ".."))   # .../price-alert-bot
dotenv_path = os.path.join(project_root, ".env")

if not os.path.exists(dotenv_path):
    # Installed into site-packages: look for .env from the working directory up
    dotenv_path = find_dotenv(usecwd=True)

if dotenv_path:
    load_dotenv(dotenv_path=dotenv_path)
else:
    logger.warning(f".env file not found in {project_root} or the working directory.")


# --- Price API Configuration ---
PRICE_API_URL = os.getenv("PRICE_API_URL", "https://api.coingecko.com/api/v3").rstrip("/")
ASSET_ID = os.getenv("ASSET_ID", "solana")       # CoinGecko coin id
ASSET_NAME = os.getenv("ASSET_NAME", "Solana")   # Display name used in messages
VS_CURRENCY = os.getenv("VS_CURRENCY", "usd")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", 10))  # Seconds, applies to both outbound APIs

# --- Messaging (Twilio) Configuration ---
TWILIO_API_URL = os.getenv("TWILIO_API_URL", "https://api.twilio.com").rstrip("/")
ACCOUNT_SID = os.getenv("ACCOUNT_SID")
AUTH_TOKEN = os.getenv("AUTH_TOKEN")
TWILIO_WHATSAPP = os.getenv("TWILIO_WHATSAPP")  # Sender, e.g. "whatsapp:+14155238886"
MY_WHATSAPP = os.getenv("MY_WHATSAPP")          # Recipient, e.g. "whatsapp:+15551234567"

# Log messages instead of sending them
NOTIFIER_DRY_RUN_STR = os.getenv("NOTIFIER_DRY_RUN", "False").lower()
NOTIFIER_DRY_RUN = NOTIFIER_DRY_RUN_STR == 'true'

# --- Schedule Configuration ---
# Checks run on clock boundaries of this interval; 60 means the top of every hour.
CHECK_INTERVAL_MINUTES = int(os.getenv("CHECK_INTERVAL_MINUTES", 60))

# --- Status Server Configuration ---
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 4000))

# --- Logging Configuration ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_TO_FILE = os.getenv("LOG_TO_FILE", "False").lower() == 'true'
LOG_FILENAME = os.getenv("LOG_FILENAME", "price_alert_bot.log")

# --- Validation ---
if not NOTIFIER_DRY_RUN and not all([ACCOUNT_SID, AUTH_TOKEN, TWILIO_WHATSAPP, MY_WHATSAPP]):
    logger.warning("ACCOUNT_SID, AUTH_TOKEN, TWILIO_WHATSAPP or MY_WHATSAPP is not set.")
    logger.warning("Messages cannot be delivered. Falling back to dry-run notifications.")
    NOTIFIER_DRY_RUN = True

if CHECK_INTERVAL_MINUTES <= 0:
    raise ValueError("CHECK_INTERVAL_MINUTES must be positive.")

if REQUEST_TIMEOUT <= 0:
    raise ValueError("REQUEST_TIMEOUT must be positive.")

if not 0 < PORT < 65536:
    raise ValueError("PORT must be between 1 and 65535.")

logger.info("Configuration loaded:")
logger.info(f"  PRICE_API_URL: {PRICE_API_URL}")
logger.info(f"  ASSET_ID: {ASSET_ID} ({ASSET_NAME}), VS_CURRENCY: {VS_CURRENCY}")
logger.info(f"  TWILIO_API_URL: {TWILIO_API_URL}")
logger.info(f"  ACCOUNT_SID Set: {'Yes' if ACCOUNT_SID else 'No'}")
logger.info(f"  AUTH_TOKEN Set: {'Yes' if AUTH_TOKEN else 'No'}")
logger.info(f"  NOTIFIER_DRY_RUN: {NOTIFIER_DRY_RUN}")
logger.info(f"  CHECK_INTERVAL_MINUTES: {CHECK_INTERVAL_MINUTES}")
logger.info(f"  HOST: {HOST}, PORT: {PORT}")
