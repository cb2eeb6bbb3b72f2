"""
Provides a function to configure application-wide logging.
"""

import logging
import sys
from typing import List

# Third-party loggers that are too chatty at the bot's level. urllib3 logs full
# request URLs at DEBUG, and Twilio URLs carry the account SID.
NOISY_LOGGERS = {
    "urllib3": logging.WARNING,
    "aiohttp.access": logging.WARNING,
}

def setup_logging(level=logging.INFO, log_to_file: bool = False, log_filename: str = "price_alert_bot.log"):
    """
    Configures the root logger for the price alert bot.

    Args:
        level: The minimum logging level, as a number (logging.INFO) or a name ("DEBUG").
        log_to_file: If True, logs are also appended to ``log_filename``.
        log_filename: The file to append to when log_to_file is True.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    outputs: List[str] = ["stdout"]
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    file_error = None
    if log_to_file:
        try:
            handlers.append(logging.FileHandler(log_filename, mode='a'))
            outputs.append(log_filename)
        except OSError as e:
            file_error = e

    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    for name, noisy_level in NOISY_LOGGERS.items():
        logging.getLogger(name).setLevel(max(level, noisy_level))

    if file_error is not None:
        logging.error(f"Cannot write log file '{log_filename}': {file_error}")
    logging.info(f"Logging at {logging.getLevelName(level)} to {', '.join(outputs)}.")
