from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper between untrusted configuration sources (config file, CLI) and
the listing pipeline. Coerces types, fills missing keys with defaults and
collects a warning for every correction it makes.
"""

import logging
from typing import Any, Dict, List, Tuple

from archive_listing.domain.config import get_default_config

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: Raise on invalid values instead of falling back to defaults.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    merged["bucket"] = _normalize_bucket(
        _as_str(merged.get("bucket"), defaults["bucket"], "bucket", warnings, strict)
    )
    merged["region"] = _as_str(merged.get("region"), defaults["region"], "region", warnings, strict)

    for field in ("recent_days", "large_listing_threshold"):
        merged[field] = _as_non_negative_int(
            merged.get(field), defaults[field], field, warnings, strict
        )

    merged["request_timeout"] = _as_positive_float(
        merged.get("request_timeout"), defaults["request_timeout"], "request_timeout", warnings, strict
    )
    merged["titles"] = _as_str_map(merged.get("titles"), defaults["titles"], "titles", warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _reject(msg: str, warnings: List[str], strict: bool) -> None:
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")


def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and strip string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    _reject(f"Invalid field '{field}': expected str, received {type(value).__name__}.", warnings, strict)
    return fallback


def _as_non_negative_int(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    """Coerce integers, including numeric strings in non-strict mode."""
    if value is None:
        return fallback

    if isinstance(value, str) and not strict:
        try:
            converted = int(value.strip())
        except ValueError:
            _reject(f"Invalid field '{field}': '{value}' is not an integer.", warnings, strict)
            return fallback
        warnings.append(f"Field '{field}' converted from '{value}' to {converted}.")
        value = converted

    if isinstance(value, bool) or not isinstance(value, int):
        _reject(f"Invalid field '{field}': expected int, received {type(value).__name__}.", warnings, strict)
        return fallback

    if value < 0:
        if strict:
            raise ValueError(f"Invalid field '{field}': must be >= 0.")
        warnings.append(f"Field '{field}' is negative ({value}). Using fallback.")
        return fallback
    return value


def _as_positive_float(value: Any, fallback: float, field: str, warnings: List[str], strict: bool) -> float:
    """Coerce positive numbers (seconds) to float."""
    if value is None:
        return fallback

    if isinstance(value, str) and not strict:
        try:
            value = float(value.strip())
        except ValueError:
            _reject(f"Invalid field '{field}': '{value}' is not a number.", warnings, strict)
            return fallback

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        _reject(f"Invalid field '{field}': expected number, received {type(value).__name__}.", warnings, strict)
        return fallback

    if value <= 0:
        if strict:
            raise ValueError(f"Invalid field '{field}': must be > 0.")
        warnings.append(f"Field '{field}' must be positive ({value}). Using fallback.")
        return fallback
    return float(value)


def _as_str_map(
        value: Any,
        fallback: Dict[str, str],
        field: str,
        warnings: List[str],
        strict: bool,
) -> Dict[str, str]:
    """Keep only string-to-string entries of a mapping."""
    if value is None:
        return dict(fallback)
    if not isinstance(value, dict):
        _reject(f"Invalid field '{field}': expected object, received {type(value).__name__}.", warnings, strict)
        return dict(fallback)

    out: Dict[str, str] = {}
    for k, v in value.items():
        if isinstance(k, str) and isinstance(v, str) and v.strip():
            out[k.strip().lower()] = v.strip()
        else:
            msg = f"Invalid entry in '{field}': {k!r} -> {v!r}."
            if strict:
                raise TypeError(msg)
            warnings.append(f"{msg} Entry discarded.")
    return out


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_bucket(bucket: str) -> str:
    """Hostnames are case-insensitive; store bucket names lower-cased."""
    return bucket.lower()
