"""Utility modules for hivemark.

Provides:
- text: escape_html, escape_url for literal text output
- logger: get_logger for logging
"""

from hivemark.utils.logger import get_logger
from hivemark.utils.text import escape_html, escape_url

__all__ = [
    "escape_html",
    "escape_url",
    "get_logger",
]
