from __future__ import annotations

"""
Listing Tree Builder.

Folds the flat list of FileRecords into a ListingTree of pseudo-directories
and files. The fold is a trie keyed by path segments: directory lookups only
consider the siblings of the current node, so equally named directories at
different levels stay distinct.
"""

import logging
from typing import Iterable

from archive_listing.core.analysis.release_collapser import collapse_releases
from archive_listing.domain.listing_models import ROOT_ID, FileRecord, ListingTree

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(records: Iterable[FileRecord], root_name: str) -> ListingTree:
    """
    Build the directory tree for records and collapse release directories.

    Node ids are assigned sequentially from 1 in first-encounter order while
    walking records in their given order, so identical input always yields
    identical ids.

    Args:
        records: File records in listing order.
        root_name: Display name of the synthetic root (the bucket host).

    Returns:
        ListingTree: The populated tree with default visibility applied.
    """
    tree = ListingTree(root_name)
    file_count = 0

    for record in records:
        _insert_record(tree, record)
        file_count += 1

    logger.debug(f"Tree built: {file_count} files, {len(tree)} nodes.")

    collapse_releases(tree)
    return tree

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _insert_record(tree: ListingTree, record: FileRecord) -> None:
    """Walk (creating as needed) the directories of record.path and attach the file."""
    *directories, _ = record.path.split("/")

    current_id = ROOT_ID
    for segment in directories:
        directory = tree.find_directory(current_id, segment)
        if directory is None:
            directory = tree.add_directory(current_id, segment)
        current_id = directory.id

    tree.add_file(current_id, record)
