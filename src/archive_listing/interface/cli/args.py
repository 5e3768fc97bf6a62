from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by validate_config().
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the archive-listing CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="archive-listing",
        description="Browse the contents of an object-storage bucket as a directory tree.",
    )

    # --- Storage Target ---
    p.add_argument(
        "bucket",
        nargs="?",
        default=None,
        help="Bucket to list (also the host serving downloads). Falls back to the configured bucket.",
    )
    p.add_argument(
        "-r", "--region",
        dest="region",
        default=None,
        help="Storage region of the bucket (default: us-west-2).",
    )

    # --- Views ---
    p.add_argument(
        "-s", "--search",
        dest="query",
        default=None,
        help="Show files whose path contains QUERY (case-insensitive).",
    )
    p.add_argument(
        "--recent",
        action="store_true",
        help="Show files modified within the recency window, newest first.",
    )
    p.add_argument(
        "--recent-days",
        dest="recent_days",
        type=int,
        default=None,
        help="Length of the recency window in days (default: 7).",
    )
    p.add_argument(
        "--expand-all",
        action="store_true",
        help="Render every directory, including collapsed releases.",
    )
    p.add_argument(
        "--no-tree",
        action="store_true",
        help="Do not render the directory tree.",
    )

    # --- Network ---
    p.add_argument(
        "--timeout",
        dest="request_timeout",
        type=float,
        default=None,
        help="Per-request timeout in seconds (default: 30).",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="Read configuration from this JSON file.",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the configuration file.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this rotating log file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Emit the listing as JSON.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Only options that were actually given are included.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.bucket:
        overrides["bucket"] = args.bucket
    if args.region:
        overrides["region"] = args.region
    if args.recent_days is not None:
        overrides["recent_days"] = args.recent_days
    if args.request_timeout is not None:
        overrides["request_timeout"] = args.request_timeout

    return overrides
