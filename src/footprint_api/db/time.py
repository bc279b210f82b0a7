# src/footprint_api/db/time.py
"""Time utilities for database models."""

import time
from datetime import UTC, datetime


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(UTC)


def epoch_millis() -> int:
    """Return milliseconds since the Unix epoch."""
    return int(time.time() * 1000)
