from __future__ import annotations

"""
Unit tests for the Main Entry Point.

Verifies that the installed console script routes through the supervisor
module, which installs the global exception hook before delegating to the
CLI controller.
"""

import importlib
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


def test_console_script_targets_supervisor() -> None:
    setup_text = (PROJECT_ROOT / "setup.py").read_text(encoding="utf-8")
    assert "archive-listing=archive_listing.main:main" in setup_text


def test_import_installs_exception_hook(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "excepthook", sys.__excepthook__)
    import archive_listing.main as entry

    entry = importlib.reload(entry)

    assert sys.excepthook is entry.global_exception_handler


def test_main_delegates_to_cli(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "excepthook", sys.__excepthook__)
    import archive_listing.main as entry

    monkeypatch.setattr("archive_listing.interface.cli.app.main", lambda: 7)

    assert entry.main() == 7


def test_exception_handler_exits_with_failure(
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(sys, "excepthook", sys.__excepthook__)
    import archive_listing.main as entry

    try:
        raise RuntimeError("boom")
    except RuntimeError as e:
        exc_info = (type(e), e, e.__traceback__)

    with pytest.raises(SystemExit) as excinfo:
        entry.global_exception_handler(*exc_info)

    assert excinfo.value.code == 1
    assert "boom" in capsys.readouterr().err
