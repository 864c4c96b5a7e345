"""
Database models for the URL shortener.

Two tables: `urls` holds the mappings and their aggregate click data,
`click_logs` holds one row per redirect and cascades with its mapping.
"""

from .url import URL
from .click_log import ClickLog

__all__ = ["URL", "ClickLog"]
