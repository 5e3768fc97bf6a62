from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for configuration dictionaries and listing records.
"""

import os
import sys
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from archive_listing.domain.listing_models import FileRecord  # noqa: E402

FIXED_NOW = datetime(2024, 6, 15, 12, 0, 0, tzinfo=timezone.utc)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def now() -> datetime:
    """Fixed reference time used by recency and formatting tests."""
    return FIXED_NOW


@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Mirrors the structure produced by validate_config().
    """
    return {
        "bucket": "archive.example.net",
        "region": "us-west-2",
        "recent_days": 7,
        "large_listing_threshold": 10000,
        "titles": {"archive.example.net": "Example Archive Listing"},
        "request_timeout": 30.0,
    }


@pytest.fixture
def make_record() -> Callable[..., FileRecord]:
    """Factory building FileRecords from a path and an age in days."""

    def _make(path: str, age_days: float = 1.0, size: int = 1024) -> FileRecord:
        return FileRecord(
            path=path,
            name=path.split("/")[-1],
            size=size,
            last_modified=FIXED_NOW - timedelta(days=age_days),
            download_url=f"http://archive.example.net/{path}",
        )

    return _make


@pytest.fixture
def make_records(make_record: Callable[..., FileRecord]) -> Callable[[List[str]], List[FileRecord]]:
    """Factory building one FileRecord per path, all one day old."""

    def _make(paths: List[str]) -> List[FileRecord]:
        return [make_record(p) for p in paths]

    return _make
