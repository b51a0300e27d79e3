"""
Time-related utilities for the application.

All timestamps are generated in UTC. Sticker records store creation time
as integer milliseconds since the Unix epoch; API responses carry
ISO-8601 strings with timezone information.
"""

from datetime import datetime, timezone
import time


def utc_now_iso() -> str:
    """Return current UTC time in ISO-8601 format.

    Example:
        2024-01-15T10:42:31.123456+00:00
    """
    return datetime.now(timezone.utc).isoformat()


def utc_now_millis() -> int:
    """Return milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000

