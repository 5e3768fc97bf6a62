from __future__ import annotations

"""
Unit tests for Domain Models.

Verifies:
1. Arena bookkeeping of ListingTree (ids, lookups, walk order).
2. Visibility mutation helpers used by the presentation layer.
3. Immutability of frozen record dataclasses.
"""

import dataclasses

import pytest

from archive_listing.domain.listing_models import ROOT_ID, ListingTree, RawObjectRecord


def test_new_tree_has_visible_root() -> None:
    tree = ListingTree("archive.example.net")

    assert tree.root.id == ROOT_ID == 0
    assert tree.root.name == "archive.example.net"
    assert tree.root.show is True
    assert len(tree) == 1


def test_ids_are_shared_between_directories_and_files(make_record) -> None:
    tree = ListingTree("bucket")
    d = tree.add_directory(ROOT_ID, "a")
    f = tree.add_file(d.id, make_record("a/x.txt"))
    d2 = tree.add_directory(ROOT_ID, "b")

    assert (d.id, f.id, d2.id) == (1, 2, 3)
    assert f.is_file and not d.is_file
    assert f.name == "x.txt"


def test_find_directory_ignores_files_and_other_levels(make_record) -> None:
    tree = ListingTree("bucket")
    a = tree.add_directory(ROOT_ID, "a")
    tree.add_file(ROOT_ID, make_record("x/b"))
    nested = tree.add_directory(a.id, "b")

    assert tree.find_directory(ROOT_ID, "a") is a
    assert tree.find_directory(ROOT_ID, "b") is None
    assert tree.find_directory(a.id, "b") is nested


def test_files_cannot_have_children(make_record) -> None:
    tree = ListingTree("bucket")
    f = tree.add_file(ROOT_ID, make_record("a/b"))

    with pytest.raises(ValueError):
        tree.add_directory(f.id, "nope")


def test_walk_is_depth_first_in_child_order() -> None:
    tree = ListingTree("bucket")
    a = tree.add_directory(ROOT_ID, "a")
    tree.add_directory(a.id, "a1")
    tree.add_directory(ROOT_ID, "b")

    assert [n.name for n in tree.walk()] == ["bucket", "a", "a1", "b"]


def test_toggle_and_set_show() -> None:
    tree = ListingTree("bucket")
    a = tree.add_directory(ROOT_ID, "a")

    assert tree.toggle(a.id) is False
    assert tree.toggle(a.id) is True
    tree.set_show(a.id, False)
    assert tree.node(a.id).show is False


def test_set_children_order_requires_permutation() -> None:
    tree = ListingTree("bucket")
    a = tree.add_directory(ROOT_ID, "a")
    b = tree.add_directory(ROOT_ID, "b")

    tree.set_children_order(ROOT_ID, [b.id, a.id])
    assert tree.root.children == [b.id, a.id]

    with pytest.raises(ValueError):
        tree.set_children_order(ROOT_ID, [a.id])


def test_records_are_frozen(make_record) -> None:
    record = make_record("a/b")
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.size = 0  # type: ignore[misc]

    raw = RawObjectRecord(key="a/b")
    assert raw.size is None and raw.last_modified is None
