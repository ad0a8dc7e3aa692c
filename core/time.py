"""Time-related helpers.

Timestamps handed to composed messages are obtained through :func:`utc_now` so
that every sent date is timezone-aware and expressed in UTC.
"""

from __future__ import annotations

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return the current UTC time as an aware ``datetime`` instance."""

    return datetime.now(timezone.utc)
