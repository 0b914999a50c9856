"""CLI helpers for TENDERO.

URL sanitization for safe display, money formatting, and message emitters
that write to stderr with emoji→ASCII fallbacks.
"""

from .db_url import sanitize_url
from .messages import error, format_money, success, warn

__all__ = ["error", "format_money", "sanitize_url", "success", "warn"]
