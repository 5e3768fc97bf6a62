from __future__ import annotations

"""
Query and Recency Views.

Pure functions over the flat FileRecord list. They never mutate their
input and are cheap enough to recompute on every keystroke.
"""

from datetime import datetime, timedelta, timezone
from typing import List, Optional, Sequence

from archive_listing.domain.listing_models import FileRecord

DEFAULT_RECENT_DAYS = 7


def search(records: Sequence[FileRecord], query: str) -> List[FileRecord]:
    """
    Return the records whose path contains query, ignoring case.

    An empty query means search is inactive and yields no results.
    """
    if query == "":
        return []
    needle = query.lower()
    return [record for record in records if needle in record.path.lower()]


def recent(records: Sequence[FileRecord], window_start: datetime) -> List[FileRecord]:
    """Return records modified strictly after window_start, newest first."""
    selected = [record for record in records if record.last_modified > window_start]
    return sorted(selected, key=lambda record: record.last_modified, reverse=True)


def default_window_start(
        now: Optional[datetime] = None,
        days: int = DEFAULT_RECENT_DAYS,
) -> datetime:
    """
    Start of the recency window: now minus the given number of days.

    A naive now is interpreted as UTC so the result compares with the
    aware FileRecord timestamps.
    """
    reference = now or datetime.now(timezone.utc)
    if reference.tzinfo is None:
        reference = reference.replace(tzinfo=timezone.utc)
    return reference - timedelta(days=days)
