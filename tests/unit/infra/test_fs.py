from __future__ import annotations

"""
Unit tests for the FileSystem Infrastructure Layer.
"""

import os
from pathlib import Path

import pytest

from archive_listing.infra.fs import normalize_path


def test_normalize_path_expands_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))

    assert normalize_path("~/config.json") == os.path.join(str(tmp_path), "config.json")


def test_normalize_path_expands_env_vars(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LISTING_CONF_DIR", str(tmp_path))

    assert normalize_path(" $LISTING_CONF_DIR/config.json ") == os.path.join(str(tmp_path), "config.json")


def test_normalize_path_makes_relative_paths_absolute(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    assert normalize_path("logs/out.log") == os.path.join(str(tmp_path), "logs", "out.log")
