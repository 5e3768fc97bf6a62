from __future__ import annotations

"""
Display Formatting Helpers.

Human-friendly renderings used by the presentation layer: byte sizes,
relative timestamps and the listing title.
"""

from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

_SIZE_UNITS: List[str] = ["B", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB"]

# (threshold in seconds, unit name, seconds per unit)
_TIME_UNITS: List[Tuple[int, str, int]] = [
    (60, "second", 1),
    (3600, "minute", 60),
    (86400, "hour", 3600),
    (7 * 86400, "day", 86400),
    (30 * 86400, "week", 7 * 86400),
    (365 * 86400, "month", 30 * 86400),
]
_SECONDS_PER_YEAR = 365 * 86400


def format_size(num_bytes: int) -> str:
    """
    Format a byte count with binary (1024) steps.

    Examples: 0 -> '0 B', 1536 -> '1.5 KB', 1048576 -> '1 MB'.
    """
    value = float(num_bytes)
    unit_index = 0
    while abs(value) >= 1024 and unit_index < len(_SIZE_UNITS) - 1:
        value /= 1024
        unit_index += 1

    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {_SIZE_UNITS[unit_index]}"


def time_ago(then: datetime, now: Optional[datetime] = None) -> str:
    """
    Describe how long ago then was, e.g. '3 days ago'.

    Timestamps in the future or less than ten seconds old read 'just now'.
    """
    reference = now or datetime.now(timezone.utc)
    seconds = int((reference - then).total_seconds())

    if seconds < 10:
        return "just now"

    for threshold, unit, unit_seconds in _TIME_UNITS:
        if seconds < threshold:
            return _plural(seconds // unit_seconds, unit)
    return _plural(seconds // _SECONDS_PER_YEAR, "year")


def resolve_title(host: str, titles: Dict[str, str]) -> str:
    """Return the configured title for host, or '<host> Listing'."""
    return titles.get(host) or f"{host} Listing"


def _plural(amount: int, unit: str) -> str:
    suffix = "" if amount == 1 else "s"
    return f"{amount} {unit}{suffix} ago"
