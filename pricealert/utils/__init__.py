"""
Utility modules shared across the application.
"""
from .logging_config import setup_logging

__all__ = ["setup_logging"]
