from __future__ import annotations

"""
Listing Pipeline Engine.

Runs the listing stages in order: fetch the raw object list, extract the
browsable files, build the directory tree (which collapses release
directories) and wrap the results in a ListingSession for presentation.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Optional, Sequence

import requests

from archive_listing.core.analysis.tree_builder import build_tree
from archive_listing.core.pipeline.extractor import extract_files
from archive_listing.core.services.session import ListingSession
from archive_listing.core.services.views import default_window_start
from archive_listing.domain.listing_models import ROOT_ID, RawObjectRecord
from archive_listing.infra.network import fetch_all_objects
from archive_listing.utils.formatting import resolve_title

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def run_listing(
        config: Dict[str, Any],
        *,
        session: Optional[requests.Session] = None,
        now: Optional[datetime] = None,
) -> ListingSession:
    """
    Fetch the bucket listing and build a complete ListingSession.

    Args:
        config: Validated configuration (see validate_config).
        session: Optional requests.Session used for every page request.
        now: Reference time for the recency window (defaults to current UTC time).

    Returns:
        ListingSession: Records, tree and view state for the bucket.

    Raises:
        ListingFetchError: If the listing cannot be fetched completely.
    """
    bucket = config["bucket"]
    region = config["region"]

    raw_records = fetch_all_objects(
        bucket,
        region,
        session=session,
        timeout=config["request_timeout"],
    )
    return build_session(raw_records, config, now=now)


def build_session(
        raw_records: Sequence[RawObjectRecord],
        config: Dict[str, Any],
        *,
        now: Optional[datetime] = None,
) -> ListingSession:
    """
    Turn already fetched raw records into a ListingSession.

    Listings larger than 'large_listing_threshold' records start with the
    tree root collapsed; search and recency views stay fully available.

    Args:
        raw_records: Raw backend records in listing order.
        config: Validated configuration.
        now: Reference time for the recency window.

    Returns:
        ListingSession: The assembled session.
    """
    bucket = config["bucket"]

    records = tuple(extract_files(raw_records, bucket))
    logger.info(f"{len(records)} browsable files out of {len(raw_records)} objects.")

    tree = build_tree(records, bucket)

    threshold = config["large_listing_threshold"]
    if len(records) > threshold:
        logger.info(f"Listing exceeds {threshold} files; tree starts collapsed.")
        tree.set_show(ROOT_ID, False)

    return ListingSession(
        bucket=bucket,
        region=config["region"],
        title=resolve_title(bucket, config["titles"]),
        records=records,
        tree=tree,
        window_start=default_window_start(now, config["recent_days"]),
    )
