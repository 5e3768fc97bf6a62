from __future__ import annotations

"""
Storage Listing Client.

Retrieves the complete object listing of a bucket through the S3 REST
ListObjects API. Pages are requested one after another, each continuing
at the last key of the previous page, until the backend reports that the
listing is no longer truncated.
"""

import logging
import xml.etree.ElementTree as ET
from typing import Any, List, Optional

import requests

from archive_listing.domain.errors import ListingFetchError
from archive_listing.domain.listing_models import ListingPage, RawObjectRecord
from archive_listing.infra.network.common import DEFAULT_TIMEOUT, USER_AGENT

logger = logging.getLogger(__name__)

ENDPOINT_TEMPLATE = "http://{bucket}.s3.{region}.amazonaws.com/"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_listing_url(bucket: str, region: str) -> str:
    """Return the listing endpoint of bucket in region."""
    return ENDPOINT_TEMPLATE.format(bucket=bucket, region=region)


def fetch_all_objects(
        bucket: str,
        region: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
) -> List[RawObjectRecord]:
    """
    Fetch every object record of the bucket, following pagination.

    The result preserves backend order across pages. Any failure aborts
    the whole fetch; partial listings are never returned.

    Args:
        bucket: Bucket name (also the website host of the listing).
        region: Storage region hosting the bucket.
        session: Optional requests.Session to reuse connections.
        timeout: Per-request timeout in seconds.

    Returns:
        List[RawObjectRecord]: All records in backend order.

    Raises:
        ListingFetchError: On transport, status or parse failures.
    """
    url = build_listing_url(bucket, region)
    logger.info(f"Fetching object listing from {url}")

    records: List[RawObjectRecord] = []
    marker = ""
    pages = 0

    while True:
        page = fetch_listing_page(url, marker, session=session, timeout=timeout)
        pages += 1
        records.extend(page.records)

        if not page.is_truncated:
            break

        marker = _next_marker(page, url)
        logger.info(f"Need more results: {marker}")

    logger.info(f"Listing complete: {len(records)} objects in {pages} page(s).")
    return records


def fetch_listing_page(
        url: str,
        marker: str = "",
        *,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
) -> ListingPage:
    """
    Request and parse a single listing page.

    Args:
        url: Listing endpoint.
        marker: Continuation key; empty for the first page.
        session: Optional requests.Session.
        timeout: Request timeout in seconds.

    Returns:
        ListingPage: Parsed records and truncation flag.

    Raises:
        ListingFetchError: On transport, status or parse failures.
    """
    http: Any = session if session is not None else requests
    params = {"marker": marker} if marker else None
    headers = {"User-Agent": USER_AGENT}

    logger.debug(f"Requesting listing page (marker={marker!r})")
    try:
        response = http.get(url, params=params, headers=headers, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        logger.error(f"Network: Listing request timed out after {timeout}s: {url}")
        raise ListingFetchError(f"Listing request timed out: {url}") from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Network: Listing request failed: {e}")
        raise ListingFetchError(f"Listing request failed: {e}") from e

    try:
        return parse_listing_page(response.content)
    except ET.ParseError as e:
        logger.error(f"Network: Malformed listing document from {url}: {e}")
        raise ListingFetchError(f"Malformed listing document: {e}") from e


def parse_listing_page(document: bytes) -> ListingPage:
    """
    Parse a ListBucketResult XML document.

    Elements are matched by local name so both namespaced and plain
    documents are accepted. A missing IsTruncated element means the page
    is the last one.

    Args:
        document: Raw XML body.

    Returns:
        ListingPage: Parsed page.

    Raises:
        xml.etree.ElementTree.ParseError: If the document is not valid XML.
    """
    root = ET.fromstring(document)

    records = tuple(
        _parse_contents(element)
        for element in root
        if _local_name(element.tag) == "Contents"
    )
    truncated = (_child_text(root, "IsTruncated") or "").strip().lower() == "true"

    return ListingPage(records=records, is_truncated=truncated)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _next_marker(page: ListingPage, url: str) -> str:
    """Derive the continuation marker from the last record of a truncated page."""
    if not page.records:
        msg = f"Truncated listing page without records from {url}; cannot continue."
        logger.error(msg)
        raise ListingFetchError(msg)

    marker = page.records[-1].key
    if not marker:
        msg = f"Last record of a truncated page from {url} has no key; cannot continue."
        logger.error(msg)
        raise ListingFetchError(msg)
    return marker


def _parse_contents(element: ET.Element) -> RawObjectRecord:
    return RawObjectRecord(
        key=_child_text(element, "Key"),
        size=_child_text(element, "Size"),
        last_modified=_child_text(element, "LastModified"),
    )


def _child_text(element: ET.Element, name: str) -> Optional[str]:
    """Text of the first direct child named name, '' if empty, None if absent."""
    for child in element:
        if _local_name(child.tag) == name:
            return child.text or ""
    return None


def _local_name(tag: str) -> str:
    """Strip the '{namespace}' prefix ElementTree puts on qualified tags."""
    return tag.rsplit("}", 1)[-1]
