from __future__ import annotations

"""
Git File Index Adapter.

Wraps the two git invocations the tool needs: detecting a working tree
and listing its tracked files. Git is treated as a black box reached
through ``subprocess``.
"""

import logging
import subprocess
from typing import List, Optional

from repostructure.domain.errors import NotARepositoryError

logger = logging.getLogger(__name__)

GIT_EXECUTABLE = "git"

NOT_A_REPOSITORY_MESSAGE = (
    "Error: This script must be run from within a Git repository.\n"
    "Please navigate to your cloned repository and try again."
)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def is_inside_work_tree(cwd: Optional[str] = None) -> bool:
    """
    Check whether ``cwd`` lies inside a git working tree.

    A missing git executable counts as "not a repository".

    Args:
        cwd: Directory to check. Defaults to the process working directory.

    Returns:
        bool: True when git reports an enclosing working tree.
    """
    try:
        proc = _run_git(["rev-parse", "--is-inside-work-tree"], cwd)
    except OSError as e:
        logger.debug(f"git is not available: {e}")
        return False

    return proc.returncode == 0 and proc.stdout.strip() == "true"


def list_tracked_files(cwd: Optional[str] = None) -> List[str]:
    """
    Return every path tracked by the git index under ``cwd``.

    From the top of the working tree this is the whole index; from a
    subdirectory git lists only that subtree, relative to ``cwd``. Output
    is NUL-separated so names containing quotes, backslashes or control
    characters reach the renderer verbatim. Order is whatever git emits;
    callers sort.

    Args:
        cwd: Directory inside the working tree.

    Returns:
        List[str]: Forward-slash relative paths, empty entries removed.

    Raises:
        NotARepositoryError: If ``cwd`` is outside a working tree or git fails.
    """
    try:
        proc = _run_git(["ls-files", "-z"], cwd)
    except OSError as e:
        raise NotARepositoryError(f"{NOT_A_REPOSITORY_MESSAGE}\n({e})") from e

    if proc.returncode != 0:
        logger.debug(f"git ls-files failed: {proc.stderr.strip()}")
        raise NotARepositoryError(NOT_A_REPOSITORY_MESSAGE)

    paths = [entry for entry in proc.stdout.split("\0") if entry]
    logger.debug(f"git ls-files reported {len(paths)} tracked files.")
    return paths

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _run_git(args: List[str], cwd: Optional[str]) -> subprocess.CompletedProcess[str]:
    """Run a git subcommand and capture its text output."""
    return subprocess.run(
        [GIT_EXECUTABLE, *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
    )
