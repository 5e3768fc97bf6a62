from __future__ import annotations

"""
Listing Session State.

Holds everything one page load produces: the immutable record list, the
tree whose visibility flags the presentation layer toggles, and the
current search query. Views are recomputed on every access.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Tuple

from archive_listing.core.services.views import recent, search
from archive_listing.domain.listing_models import FileRecord, ListingTree


@dataclass
class ListingSession:
    """
    State of a single listing session.

    Attributes:
        bucket: Bucket host that was listed.
        region: Storage region of the bucket.
        title: Display title for the listing.
        records: Browsable files in listing order.
        tree: Pseudo-directory tree built from records.
        window_start: Lower bound of the recency view, fixed at load time.
        query: Current search query ('' when search is inactive).
    """
    bucket: str
    region: str
    title: str
    records: Tuple[FileRecord, ...]
    tree: ListingTree
    window_start: datetime
    query: str = ""

    def search_results(self) -> List[FileRecord]:
        return search(self.records, self.query)

    def recent_files(self) -> List[FileRecord]:
        return recent(self.records, self.window_start)

    @property
    def tree_suppressed(self) -> bool:
        """True when the tree root starts collapsed (large listings)."""
        return not self.tree.root.show
