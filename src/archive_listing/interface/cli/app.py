from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration loading
and merging (defaults, config file, CLI overrides), listing execution and
rendering of the tree, search and recency views.
"""

import json
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from archive_listing.core.analysis.tree_renderer import render_listing_tree
from archive_listing.core.pipeline.engine import run_listing
from archive_listing.core.pipeline.stages.validator import validate_config
from archive_listing.core.services.session import ListingSession
from archive_listing.domain.config import get_default_config, load_config
from archive_listing.domain.errors import ListingError
from archive_listing.domain.listing_models import ROOT_ID, FileRecord, ListingTree
from archive_listing.infra.fs import normalize_path
from archive_listing.infra.logging import LoggingConfig, configure_logging, get_logger
from archive_listing.interface.cli import args as cli_args
from archive_listing.utils.formatting import format_size, time_ago

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 listing failure, 2 bad input, 130 interrupted).
    """
    if sys.platform == "win32" and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    config_path = normalize_path(args.config_path) if args.config_path else None
    log_file = normalize_path(args.log_file) if args.log_file else None

    # 2. Logging bootstrap (console on stderr, optional rotating file)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=log_file))

    # 3. Resolve base configuration
    base_conf = get_default_config() if args.use_defaults else load_config(config_path)

    # 4. Merge overrides and validate
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    if not clean_conf["bucket"]:
        msg = "No bucket given. Pass it as an argument or set 'bucket' in the config file."
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    # 5. Listing execution phase
    now = datetime.now(timezone.utc)
    try:
        session = run_listing(clean_conf, now=now)
    except KeyboardInterrupt:
        logger.warning("Listing interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return 130
    except ListingError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.critical(f"Unexpected failure while building the listing: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    session.query = args.query or ""

    # 6. Output rendering phase
    if args.json_output:
        print(json.dumps(session_to_dict(session, include_recent=args.recent), ensure_ascii=False, indent=2))
    else:
        _print_human_listing(session, args, now)

    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge known, non-None override keys into base."""
    out = dict(base)
    for k in ("bucket", "region", "recent_days", "request_timeout"):
        if overrides.get(k) is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# JSON SERIALIZATION
# -----------------------------------------------------------------------------

def session_to_dict(session: ListingSession, *, include_recent: bool = True) -> Dict[str, Any]:
    """
    Convert a session into JSON-compatible data.

    Args:
        session: Session to serialize.
        include_recent: Include the recency view.

    Returns:
        Dict[str, Any]: Title, counts, tree and the active views.
    """
    data: Dict[str, Any] = {
        "title": session.title,
        "bucket": session.bucket,
        "region": session.region,
        "record_count": len(session.records),
        "tree": _node_to_dict(session.tree, ROOT_ID),
    }
    if include_recent:
        data["recent"] = [record_to_dict(r) for r in session.recent_files()]
    if session.query:
        data["search"] = {
            "query": session.query,
            "results": [record_to_dict(r) for r in session.search_results()],
        }
    return data


def record_to_dict(record: FileRecord) -> Dict[str, Any]:
    return {
        "path": record.path,
        "name": record.name,
        "size": record.size,
        "last_modified": record.last_modified.isoformat(),
        "download_url": record.download_url,
    }


def _node_to_dict(tree: ListingTree, node_id: int) -> Dict[str, Any]:
    node = tree.node(node_id)
    data: Dict[str, Any] = {"id": node.id, "name": node.name, "show": node.show}
    if node.record is not None:
        data.update(record_to_dict(node.record))
        data["children"] = []
    else:
        data["children"] = [_node_to_dict(tree, cid) for cid in node.children]
    return data

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_listing(session: ListingSession, args: Any, now: datetime) -> None:
    """Print title, optional search results, optional recent files and the tree."""
    print(session.title)
    print("=" * len(session.title))

    if session.query:
        results = session.search_results()
        print(f"\nSearch results for '{session.query}' ({len(results)}):")
        _print_file_list(results, now)

    if args.recent:
        files = session.recent_files()
        print(f"\nRecently modified ({len(files)}):")
        _print_file_list(files, now)

    if args.no_tree:
        return

    print()
    if session.tree_suppressed and not args.expand_all:
        print(f"({len(session.records)} files; tree collapsed, use --expand-all to render it)")
    for line in render_listing_tree(session.tree, expand_all=args.expand_all, now=now):
        print(line)


def _print_file_list(records: List[FileRecord], now: datetime) -> None:
    if not records:
        print("  (none)")
        return
    for r in records:
        print(f"  {r.path} ({format_size(r.size)}, {time_ago(r.last_modified, now)})")
        print(f"    {r.download_url}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
