from __future__ import annotations

"""
Unit tests for the Tree Renderer.

Verifies connectors, collapsed/expanded markers and the rendering of
file details.
"""

from archive_listing.core.analysis.tree_builder import build_tree
from archive_listing.core.analysis.tree_renderer import render_listing_tree
from archive_listing.domain.listing_models import ROOT_ID

PATHS = ["opx/1.0/a.bin", "opx/2.0/a.bin", "docs/readme.txt"]


def test_render_honours_collapsed_releases(make_records, now) -> None:
    tree = build_tree(make_records(PATHS), "bucket")

    lines = render_listing_tree(tree, now=now)

    assert lines == [
        "▾ bucket/",
        "├── ▾ opx/",
        "│   ├── ▾ 2.0/",
        "│   │   └── a.bin (1 KB, 1 day ago)",
        "│   └── ▸ 1.0/",
        "└── ▾ docs/",
        "    └── readme.txt (1 KB, 1 day ago)",
    ]


def test_render_expand_all_draws_hidden_directories(make_records, now) -> None:
    tree = build_tree(make_records(PATHS), "bucket")

    output = "\n".join(render_listing_tree(tree, expand_all=True, now=now))

    assert "▸" not in output
    assert "│   └── ▾ 1.0/" in output
    assert "│       └── a.bin (1 KB, 1 day ago)" in output


def test_collapsed_root_renders_heading_only(make_records, now) -> None:
    tree = build_tree(make_records(PATHS), "bucket")
    tree.set_show(ROOT_ID, False)

    assert render_listing_tree(tree, now=now) == ["▸ bucket/"]


def test_toggling_a_directory_changes_the_rendering(make_records, now) -> None:
    tree = build_tree(make_records(PATHS), "bucket")
    docs = tree.find_directory(ROOT_ID, "docs")

    tree.toggle(docs.id)

    lines = render_listing_tree(tree, now=now)
    assert lines[-1] == "└── ▸ docs/"
