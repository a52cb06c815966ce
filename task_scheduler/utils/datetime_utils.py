"""Date and time utilities."""

import math
from datetime import datetime
from typing import Optional


DEFAULT_DATETIME_FORMAT = "%Y-%m-%d %H:%M"


def hours_until(now: datetime, moment: datetime) -> int:
    """Get whole hours from ``now`` to ``moment``, rounded toward negative infinity."""
    return math.floor((moment - now).total_seconds() / 3600)


def parse_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp, passing ``None`` through."""
    if value is None:
        return None
    return datetime.fromisoformat(value)


def format_datetime(value: datetime, fmt: str = DEFAULT_DATETIME_FORMAT) -> str:
    """Format a timestamp for display."""
    return value.strftime(fmt)
