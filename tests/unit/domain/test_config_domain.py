from __future__ import annotations

"""
Unit tests for Configuration Domain Management.
"""

import json
from pathlib import Path

from archive_listing.domain.config import DEFAULT_TITLES, get_default_config, load_config


def test_default_config_keys() -> None:
    cfg = get_default_config()

    assert set(cfg) == {
        "bucket", "region", "recent_days", "large_listing_threshold", "titles", "request_timeout",
    }
    assert cfg["titles"] == DEFAULT_TITLES
    assert cfg["titles"] is not DEFAULT_TITLES


def test_load_config_missing_file_returns_defaults(tmp_path: Path) -> None:
    assert load_config(str(tmp_path / "absent.json")) == get_default_config()


def test_load_config_merges_file_over_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "bucket": "files.example.org",
        "recent_days": 3,
        "titles": {"files.example.org": "Example Files"},
    }), encoding="utf-8")

    cfg = load_config(str(path))

    assert cfg["bucket"] == "files.example.org"
    assert cfg["recent_days"] == 3
    assert cfg["region"] == "us-west-2"
    assert cfg["titles"]["files.example.org"] == "Example Files"
    assert cfg["titles"]["archive.openswitch.net"] == "OPX Archive Listing"


def test_load_config_ignores_corrupted_file(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_config(str(path)) == get_default_config()

    path.write_text("[1, 2]", encoding="utf-8")
    assert load_config(str(path)) == get_default_config()
