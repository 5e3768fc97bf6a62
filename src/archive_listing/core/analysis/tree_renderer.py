from __future__ import annotations

"""
Tree Renderer.

Converts a ListingTree into text lines with ASCII connectors. Visibility
flags are honoured the way the listing page honours them: a collapsed
directory is drawn with '▸' and its contents are omitted; an expanded one
is drawn with '▾'. Files are always drawn when their parent is expanded.
"""

from datetime import datetime
from typing import List, Optional

from archive_listing.domain.listing_models import ROOT_ID, ListingTree, TreeNode
from archive_listing.utils.formatting import format_size, time_ago

EXPANDED_MARK = "▾"
COLLAPSED_MARK = "▸"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_listing_tree(
        tree: ListingTree,
        *,
        expand_all: bool = False,
        now: Optional[datetime] = None,
) -> List[str]:
    """
    Render the whole tree, starting with the root heading.

    Args:
        tree: Tree to render.
        expand_all: Ignore visibility flags and draw every node.
        now: Reference time for relative timestamps.

    Returns:
        List[str]: Visual lines of the tree.
    """
    root = tree.root
    lines: List[str] = [_directory_label(root, expand_all)]
    if root.show or expand_all:
        _render_children(tree, ROOT_ID, lines, prefix="", expand_all=expand_all, now=now)
    return lines


def format_file_entry(node: TreeNode, now: Optional[datetime] = None) -> str:
    """Return 'name (size, relative time)' for a file node."""
    record = node.record
    if record is None:
        return node.name
    return f"{node.name} ({format_size(record.size)}, {time_ago(record.last_modified, now)})"

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _render_children(
        tree: ListingTree,
        node_id: int,
        lines: List[str],
        prefix: str,
        expand_all: bool,
        now: Optional[datetime],
) -> None:
    children = tree.children(node_id)
    total = len(children)

    for i, child in enumerate(children):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "

        if child.is_file:
            lines.append(f"{prefix}{connector}{format_file_entry(child, now)}")
            continue

        lines.append(f"{prefix}{connector}{_directory_label(child, expand_all)}")
        if child.show or expand_all:
            new_prefix = prefix + ("    " if is_last else "│   ")
            _render_children(tree, child.id, lines, new_prefix, expand_all, now)


def _directory_label(node: TreeNode, expand_all: bool) -> str:
    mark = EXPANDED_MARK if (node.show or expand_all) else COLLAPSED_MARK
    return f"{mark} {node.name}/"
