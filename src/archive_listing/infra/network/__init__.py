from __future__ import annotations

"""
Network Communication Infrastructure.

Facade over the storage listing client.
"""

from archive_listing.infra.network.storage_client import (
    build_listing_url,
    fetch_all_objects,
    fetch_listing_page,
    parse_listing_page,
)

__all__ = [
    "build_listing_url",
    "fetch_all_objects",
    "fetch_listing_page",
    "parse_listing_page",
]
