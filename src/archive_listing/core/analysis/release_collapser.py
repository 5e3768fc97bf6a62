from __future__ import annotations

"""
Release Directory Collapser.

Detects directories that hold versioned releases and, by default, shows
only the newest one. A directory counts as a release directory when the
name of its first child starts with a decimal digit. The heuristic is
intentionally simple: names are never parsed as versions.

The analysis is split into a pure planning pass and an explicit write step
so the tree is only mutated in one place.
"""

import re
from typing import Dict, List, Optional

from archive_listing.domain.listing_models import ROOT_ID, CollapsePlan, ListingTree

_RELEASE_NAME_RX = re.compile(r"^[0-9]")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def is_release_name(name: str) -> bool:
    """Return True if name starts with an ASCII decimal digit."""
    return bool(_RELEASE_NAME_RX.match(name))


def plan_release_collapse(tree: ListingTree, node_id: int = ROOT_ID) -> CollapsePlan:
    """
    Compute the collapse for node_id and every directory below it.

    For each release directory the plan reverses the child order, hides
    every child and then shows the first child (in reversed order) whose
    name starts with a digit. If none does, all children stay hidden.
    Every directory is visited, whether or not its parent was a release
    directory.

    Args:
        tree: Tree to analyse. It is not modified.
        node_id: Subtree root to start from.

    Returns:
        CollapsePlan: New child orders and visibility flags.
    """
    orders: Dict[int, List[int]] = {}
    visibility: Dict[int, bool] = {}

    for node in tree.walk(node_id):
        if node.is_file or not node.children:
            continue

        first_child = tree.node(node.children[0])
        if not is_release_name(first_child.name):
            continue

        reversed_order = list(reversed(node.children))
        orders[node.id] = reversed_order

        for child_id in reversed_order:
            visibility[child_id] = False

        selected = select_newest_release([tree.node(cid).name for cid in reversed_order])
        if selected is not None:
            visibility[reversed_order[selected]] = True

    return CollapsePlan(orders=orders, visibility=visibility)


def select_newest_release(names: List[str]) -> Optional[int]:
    """
    Index of the first release-like name, or None if there is none.

    The scan is bounded by the list; None means every entry stays hidden.
    """
    for index, name in enumerate(names):
        if is_release_name(name):
            return index
    return None


def apply_collapse_plan(tree: ListingTree, plan: CollapsePlan) -> None:
    """Write a CollapsePlan into tree."""
    for node_id, order in plan.orders.items():
        tree.set_children_order(node_id, order)
    for node_id, show in plan.visibility.items():
        tree.set_show(node_id, show)


def collapse_releases(tree: ListingTree, node_id: int = ROOT_ID) -> CollapsePlan:
    """
    Plan and apply the release collapse in one call.

    Returns:
        CollapsePlan: The plan that was applied.
    """
    plan = plan_release_collapse(tree, node_id)
    apply_collapse_plan(tree, plan)
    return plan
