from __future__ import annotations

"""
Unit tests for the Configuration Validator.

Verifies:
1. Default value injection.
2. Type coercion of string inputs.
3. Strict mode validation.
"""

import pytest

from archive_listing.core.pipeline.stages.validator import validate_config


def test_validate_none_returns_defaults() -> None:
    cfg, warnings = validate_config(None)

    assert cfg["region"] == "us-west-2"
    assert cfg["recent_days"] == 7
    assert cfg["large_listing_threshold"] == 10000
    assert len(warnings) == 1


def test_validate_empty_dict_returns_defaults() -> None:
    cfg, warnings = validate_config({})

    assert cfg["bucket"] == ""
    assert cfg["request_timeout"] == 30.0
    assert cfg["titles"]["deb.openswitch.net"] == "OPX Debian Package Listing"
    assert warnings == []


def test_validate_passes_through_valid_config(mock_config_dict) -> None:
    cfg, warnings = validate_config(mock_config_dict)

    assert cfg == mock_config_dict
    assert warnings == []


def test_validate_converts_numeric_strings() -> None:
    cfg, warnings = validate_config({"recent_days": "14", "request_timeout": "2.5"})

    assert cfg["recent_days"] == 14
    assert cfg["request_timeout"] == 2.5
    assert len(warnings) == 1  # only the int conversion is reported


def test_validate_rejects_bad_values_with_fallback() -> None:
    raw = {
        "recent_days": -1,
        "large_listing_threshold": True,
        "request_timeout": 0,
        "region": 42,
        "titles": {"a.example": 3, "b.example": "B"},
    }
    cfg, warnings = validate_config(raw)

    assert cfg["recent_days"] == 7
    assert cfg["large_listing_threshold"] == 10000
    assert cfg["request_timeout"] == 30.0
    assert cfg["region"] == "us-west-2"
    assert cfg["titles"] == {"b.example": "B"}
    assert len(warnings) == 5


def test_validate_normalizes_bucket_host() -> None:
    cfg, _ = validate_config({"bucket": "  Archive.Example.NET "})
    assert cfg["bucket"] == "archive.example.net"


def test_validate_strict_mode_raises() -> None:
    with pytest.raises(TypeError):
        validate_config("not a dict", strict=True)
    with pytest.raises(TypeError):
        validate_config({"recent_days": "7"}, strict=True)
    with pytest.raises(ValueError):
        validate_config({"request_timeout": -3}, strict=True)
