from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures: sample path lists and a throwaway git repository factory.
"""

import os
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Callable, Dict, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

GIT_AVAILABLE = shutil.which("git") is not None


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_paths() -> List[str]:
    """Tracked paths of a small mixed project, deliberately unsorted."""
    return [
        "src/pkg/util.go",
        ".github/workflows/ci.yml",
        "README.md",
        "src/main.go",
        ".env",
        "docs/guide/.draft.md",
        "docs/guide/intro.md",
    ]


def _git(repo: Path, *args: str) -> None:
    env = os.environ.copy()
    env.update({
        "GIT_AUTHOR_NAME": "Test",
        "GIT_AUTHOR_EMAIL": "test@example.com",
        "GIT_COMMITTER_NAME": "Test",
        "GIT_COMMITTER_EMAIL": "test@example.com",
    })
    subprocess.run(
        ["git", *args],
        cwd=repo,
        env=env,
        check=True,
        capture_output=True,
    )


@pytest.fixture
def make_git_repo(tmp_path: Path) -> Callable[..., Path]:
    """
    Return a factory creating a git repository with the given tracked files.

    Files listed in ``untracked`` are written but never added to the index.
    """
    if not GIT_AVAILABLE:
        pytest.skip("git executable not available")

    def _factory(files: Dict[str, str], untracked: Dict[str, str] | None = None) -> Path:
        repo = tmp_path / "repo"
        repo.mkdir()
        _git(repo, "init", "-q")

        for rel, content in files.items():
            target = repo / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        for rel, content in (untracked or {}).items():
            target = repo / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")

        if files:
            _git(repo, "add", "--", *files.keys())
        return repo

    return _factory
