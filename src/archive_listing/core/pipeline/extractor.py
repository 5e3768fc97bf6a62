from __future__ import annotations

"""
Record Extraction Stage.

Normalizes raw backend entries into FileRecords. Keys at the bucket root
and packaging indices under 'dists/' are not browsable and are dropped.
Entries with missing or unparseable fields are skipped individually so
one bad record never blanks the whole listing.
"""

import logging
import re
from datetime import datetime, timezone
from typing import Iterable, List, Optional
from urllib.parse import quote

from archive_listing.domain.listing_models import FileRecord, RawObjectRecord

logger = logging.getLogger(__name__)

DOWNLOAD_SCHEME = "http"
EXCLUDED_SUBSTRING = "dists/"
_FRACTION_RX = re.compile(r"(\d{2}:\d{2}:\d{2})\.(\d+)")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def extract_files(raw_records: Iterable[RawObjectRecord], bucket: str) -> List[FileRecord]:
    """
    Map raw object records to FileRecords, preserving order.

    Args:
        raw_records: Records as parsed from the listing pages.
        bucket: Bucket host used to build download URLs.

    Returns:
        List[FileRecord]: Browsable file records.
    """
    files: List[FileRecord] = []
    skipped = 0
    malformed = 0

    for raw in raw_records:
        if raw.key is None:
            malformed += 1
            logger.warning("Skipping listing entry without a Key element.")
            continue

        if not is_browsable_key(raw.key):
            skipped += 1
            continue

        record = _to_file_record(raw, bucket)
        if record is None:
            malformed += 1
            continue
        files.append(record)

    logger.debug(
        f"Extracted {len(files)} files ({skipped} filtered, {malformed} malformed)."
    )
    return files


def is_browsable_key(key: str) -> bool:
    """
    Decide whether a key represents a user-facing file.

    Root-level keys (no '/'), keys containing 'dists/' and folder
    placeholders ending in '/' are excluded.
    """
    if "/" not in key or EXCLUDED_SUBSTRING in key:
        return False
    return not key.endswith("/")


def build_download_url(bucket: str, key: str) -> str:
    """Return the public download URL of key served from the bucket host."""
    return f"{DOWNLOAD_SCHEME}://{bucket}/{quote(key, safe='/')}"


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO-8601 listing timestamp into an aware datetime.

    A trailing 'Z' and naive values are interpreted as UTC. Fractional
    seconds of any length are normalized to microseconds.

    Raises:
        ValueError: If value is not a valid ISO-8601 timestamp.
    """
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    text = _FRACTION_RX.sub(_pad_fraction, text, count=1)
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _pad_fraction(match: re.Match) -> str:
    return f"{match.group(1)}.{(match.group(2) + '000000')[:6]}"


def _to_file_record(raw: RawObjectRecord, bucket: str) -> Optional[FileRecord]:
    key = raw.key or ""

    if raw.size is None or raw.last_modified is None:
        logger.warning(f"Skipping '{key}': missing Size or LastModified.")
        return None

    try:
        size = int(raw.size.strip())
        last_modified = parse_timestamp(raw.last_modified)
    except ValueError as e:
        logger.warning(f"Skipping '{key}': {e}")
        return None

    return FileRecord(
        path=key,
        name=key.split("/")[-1],
        size=size,
        last_modified=last_modified,
        download_url=build_download_url(bucket, key),
    )
