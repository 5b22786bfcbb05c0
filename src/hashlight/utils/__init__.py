"""Utility modules for hashlight.

Provides:
- hashing: crc8 for content-derived color selection
- logger: get_logger for namespaced logging
- text: escape_html for opt-in escaping
"""

from hashlight.utils.hashing import crc8
from hashlight.utils.logger import get_logger
from hashlight.utils.text import escape_html

__all__ = [
    "crc8",
    "escape_html",
    "get_logger",
]
