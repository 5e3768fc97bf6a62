from __future__ import annotations

"""
Listing Domain Data Models.

Defines the records exchanged between the listing stages (raw backend
entries, normalized file records) and the node arena that holds the
pseudo-directory tree built from them.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterator, List, Optional, Tuple

ROOT_ID = 0

# -----------------------------------------------------------------------------
# BACKEND RECORDS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class RawObjectRecord:
    """
    One object entry exactly as reported by the storage listing.

    Attributes:
        key: Object key, or None if the element was missing.
        size: Byte count as text, or None if missing.
        last_modified: ISO-8601 timestamp as text, or None if missing.
    """
    key: Optional[str]
    size: Optional[str] = None
    last_modified: Optional[str] = None


@dataclass(frozen=True)
class ListingPage:
    """A single parsed page of the storage listing."""
    records: Tuple[RawObjectRecord, ...] = ()
    is_truncated: bool = False

# -----------------------------------------------------------------------------
# NORMALIZED RECORDS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileRecord:
    """
    A downloadable object in the bucket.

    Attributes:
        path: Full slash-delimited key, unique within the listing.
        name: Last path segment.
        size: Size in bytes.
        last_modified: Timezone-aware modification timestamp.
        download_url: Absolute URL for retrieving the object.
    """
    path: str
    name: str
    size: int
    last_modified: datetime
    download_url: str

# -----------------------------------------------------------------------------
# TREE ARENA
# -----------------------------------------------------------------------------

@dataclass
class TreeNode:
    """
    Directory or file node stored in a ListingTree.

    File nodes carry their FileRecord and never receive children.
    Children are referenced by node id, in display order.
    """
    id: int
    name: str
    children: List[int] = field(default_factory=list)
    show: bool = True
    record: Optional[FileRecord] = None

    @property
    def is_file(self) -> bool:
        return self.record is not None


class ListingTree:
    """
    Node arena for the pseudo-directory hierarchy.

    Owns every TreeNode by id. The root is a synthetic directory with id 0.
    Nodes are only added during construction; afterwards only child order
    and visibility change.
    """

    def __init__(self, root_name: str):
        self._nodes: Dict[int, TreeNode] = {ROOT_ID: TreeNode(id=ROOT_ID, name=root_name)}
        self._next_id = ROOT_ID + 1

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    @property
    def root(self) -> TreeNode:
        return self._nodes[ROOT_ID]

    def node(self, node_id: int) -> TreeNode:
        """Return the node registered under node_id (KeyError if unknown)."""
        return self._nodes[node_id]

    def children(self, node_id: int) -> List[TreeNode]:
        """Return the child nodes of node_id in their current order."""
        return [self._nodes[cid] for cid in self._nodes[node_id].children]

    def find_directory(self, parent_id: int, name: str) -> Optional[TreeNode]:
        """Locate a directory among the direct children of parent_id by exact name."""
        for child in self.children(parent_id):
            if not child.is_file and child.name == name:
                return child
        return None

    def add_directory(self, parent_id: int, name: str) -> TreeNode:
        """Create a directory node with the next id and append it to parent_id."""
        return self._attach(parent_id, TreeNode(id=self._allocate_id(), name=name))

    def add_file(self, parent_id: int, record: FileRecord) -> TreeNode:
        """Create a file leaf for record with the next id and append it to parent_id."""
        node = TreeNode(id=self._allocate_id(), name=record.name, record=record)
        return self._attach(parent_id, node)

    def walk(self, node_id: int = ROOT_ID) -> Iterator[TreeNode]:
        """Yield node_id and all of its descendants, depth-first in child order."""
        stack = [node_id]
        while stack:
            current = self._nodes[stack.pop()]
            yield current
            stack.extend(reversed(current.children))

    def set_show(self, node_id: int, value: bool) -> None:
        self._nodes[node_id].show = bool(value)

    def toggle(self, node_id: int) -> bool:
        """Flip the visibility of node_id and return the new state."""
        node = self._nodes[node_id]
        node.show = not node.show
        return node.show

    def set_children_order(self, node_id: int, order: List[int]) -> None:
        """
        Replace the child order of node_id.

        The new order must be a permutation of the current children;
        re-parenting is not allowed after construction.
        """
        current = self._nodes[node_id].children
        if sorted(order) != sorted(current):
            raise ValueError(f"Child order for node {node_id} is not a permutation of its children.")
        self._nodes[node_id].children = list(order)

    def _allocate_id(self) -> int:
        node_id = self._next_id
        self._next_id += 1
        return node_id

    def _attach(self, parent_id: int, node: TreeNode) -> TreeNode:
        parent = self._nodes[parent_id]
        if parent.is_file:
            raise ValueError(f"Cannot attach '{node.name}' under file node {parent_id}.")
        self._nodes[node.id] = node
        parent.children.append(node.id)
        return node


@dataclass(frozen=True)
class CollapsePlan:
    """
    Outcome of the release-directory analysis, not yet applied to a tree.

    Attributes:
        orders: New child order for every directory detected as a release directory.
        visibility: Visibility flag to set per node id.
    """
    orders: Dict[int, List[int]] = field(default_factory=dict)
    visibility: Dict[int, bool] = field(default_factory=dict)
