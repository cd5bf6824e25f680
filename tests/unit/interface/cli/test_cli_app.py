from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Collaborators (work-tree check, clipboard detection, renderer) are patched so
these tests exercise routing and exit codes only.
"""

from pathlib import Path
from typing import List

import pytest

from repostructure.core.tree_renderer import render_document
from repostructure.domain.errors import UnsupportedRuntimeError
from repostructure.infra.logging import shutdown_logging
from repostructure.interface.cli import app

APP = "repostructure.interface.cli.app"


class RecordingSink:
    name = "recording"

    def __init__(self) -> None:
        self.received: List[str] = []

    def send(self, text: str) -> None:
        self.received.append(text)


@pytest.fixture(autouse=True)
def reset_logging():
    shutdown_logging()
    yield
    shutdown_logging()


@pytest.fixture
def fake_repo(monkeypatch):
    """Patch the controller so it sees a repo with a fixed file list."""
    state = {"include_hidden": None, "sink": RecordingSink()}

    def fake_generate(include_hidden=False):
        state["include_hidden"] = include_hidden
        return render_document([".env", "README.md", "src/main.go"], include_hidden=include_hidden)

    monkeypatch.setattr(f"{APP}.is_inside_work_tree", lambda: True)
    monkeypatch.setattr(f"{APP}.detect_clipboard_sink", lambda: state["sink"])
    monkeypatch.setattr(f"{APP}.generate_structure", fake_generate)
    return state


def test_default_run_prints_and_copies(fake_repo, capsys) -> None:
    assert app.main([]) == 0

    out = capsys.readouterr().out
    assert out.startswith('<context name="directoryStructure"')
    assert "- README.md" in out
    assert "- .env" not in out
    assert out.rstrip().endswith("Structure copied to clipboard!")
    assert fake_repo["include_hidden"] is False
    assert len(fake_repo["sink"].received) == 1


def test_all_flag_includes_hidden(fake_repo, capsys) -> None:
    assert app.main(["--all"]) == 0

    assert "- .env" in capsys.readouterr().out
    assert fake_repo["include_hidden"] is True


def test_output_flag_writes_file(fake_repo, capsys, tmp_path: Path) -> None:
    target = tmp_path / "structure.xml"

    assert app.main(["-o", str(target)]) == 0

    out = capsys.readouterr().out
    assert "<context" not in out
    assert f"Repository structure saved to {target}" in out
    assert "Also copied to clipboard!" in out
    assert target.read_text(encoding="utf-8").endswith("</context>\n")


def test_no_clipboard_skips_detection(fake_repo, monkeypatch, capsys) -> None:
    def explode():
        raise AssertionError("clipboard detection should not run")

    monkeypatch.setattr(f"{APP}.detect_clipboard_sink", explode)

    assert app.main(["--no-clipboard"]) == 0
    captured = capsys.readouterr()
    assert "copied to clipboard" not in captured.out
    assert captured.err == ""


def test_missing_clipboard_is_a_warning(fake_repo, capsys) -> None:
    fake_repo["sink"] = None

    assert app.main([]) == 0
    captured = capsys.readouterr()
    assert "No clipboard command found for your OS" in captured.err
    assert "- README.md" in captured.out


def test_not_a_repository_exits_one(monkeypatch, capsys) -> None:
    monkeypatch.setattr(f"{APP}.is_inside_work_tree", lambda: False)

    assert app.main([]) == 1
    err = capsys.readouterr().err
    assert "must be run from within a Git repository" in err


def test_unsupported_runtime_exits_one(fake_repo, monkeypatch, capsys) -> None:
    def old_runtime():
        raise UnsupportedRuntimeError("This tool requires Python 3.8 or higher (found 2.7).")

    monkeypatch.setattr(f"{APP}.check_runtime", old_runtime)

    assert app.main([]) == 1
    assert "requires Python 3.8" in capsys.readouterr().err


def test_unknown_argument_prints_usage(capsys) -> None:
    assert app.main(["--bogus"]) == 1

    err = capsys.readouterr().err
    assert "Unknown parameter: --bogus" in err
    assert "usage: repo-structure" in err


def test_help_exits_zero(capsys) -> None:
    assert app.main(["--help"]) == 0
    assert "usage: repo-structure" in capsys.readouterr().out


def test_unwritable_output_exits_one(fake_repo, capsys, tmp_path: Path) -> None:
    target = tmp_path / "no_such_dir" / "out.xml"

    assert app.main(["-o", str(target)]) == 1
    assert "Could not write" in capsys.readouterr().err


def test_log_file_collects_debug_records(fake_repo, capsys, tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "repo-structure.log"

    assert app.main(["--debug", "--no-clipboard", "--log-file", str(log_file)]) == 0
    shutdown_logging()

    content = log_file.read_text(encoding="utf-8")
    assert "Effective configuration" in content
    assert "Snapshot ready: 2 files, 1 directories." in content
    assert "Delivery finished: file=None, stdout=True, clipboard=False, warnings=0" in content


def test_log_file_respects_default_level(fake_repo, capsys, tmp_path: Path) -> None:
    log_file = tmp_path / "quiet.log"

    assert app.main(["--no-clipboard", "--log-file", str(log_file)]) == 0
    shutdown_logging()

    assert "Effective configuration" not in log_file.read_text(encoding="utf-8")


def test_delivery_warnings_are_logged(fake_repo, capsys, tmp_path: Path) -> None:
    fake_repo["sink"] = None
    log_file = tmp_path / "delivery.log"

    assert app.main(["--debug", "--log-file", str(log_file)]) == 0
    shutdown_logging()

    assert "clipboard=False, warnings=1" in log_file.read_text(encoding="utf-8")


def test_empty_snapshot_is_logged(fake_repo, monkeypatch, capsys, tmp_path: Path) -> None:
    monkeypatch.setattr(f"{APP}.generate_structure", lambda include_hidden=False: render_document([]))
    log_file = tmp_path / "empty.log"

    assert app.main(["--debug", "--no-clipboard", "--log-file", str(log_file)]) == 0
    shutdown_logging()

    assert "# (No files found matching criteria)" in capsys.readouterr().out
    assert "No tracked files matched; rendering the placeholder." in log_file.read_text(encoding="utf-8")
