from __future__ import annotations

"""
Tree Renderer.

Folds a sorted list of tracked paths into an indented outline. Directory
headers are printed the first time a path under them is seen; files are
printed as leaves beneath their parent. The result is wrapped in the
``directoryStructure`` context tags.
"""

import logging
from typing import Callable, Iterable, List, Optional, Set

from repostructure.domain.tree_models import (
    CLOSE_TAG,
    EMPTY_PLACEHOLDER,
    ENTRY_MARKER,
    HIDDEN_MARKER,
    INDENT_UNIT,
    OPEN_TAG,
    PATH_SEPARATOR,
    RenderedDocument,
)
from repostructure.infra.git import list_tracked_files

logger = logging.getLogger(__name__)

FileLister = Callable[[Optional[str]], List[str]]

# -----------------------------------------------------------------------------
# FILTERING
# -----------------------------------------------------------------------------

def is_hidden_path(path: str) -> bool:
    """Return True if any segment of ``path`` starts with a period."""
    return any(seg.startswith(HIDDEN_MARKER) for seg in path.split(PATH_SEPARATOR))


def filter_hidden(paths: Iterable[str], include_hidden: bool) -> List[str]:
    """
    Drop empty entries and, unless ``include_hidden`` is set, hidden paths.

    Relative order of the surviving paths is preserved.
    """
    return [
        p for p in paths
        if p and (include_hidden or not is_hidden_path(p))
    ]

# -----------------------------------------------------------------------------
# RENDERING
# -----------------------------------------------------------------------------

def render_tree_lines(paths: Iterable[str]) -> List[str]:
    """
    Render already-sorted paths as an indented outline.

    Each directory prefix is emitted once, at two spaces per level of
    depth; the file name follows at the depth of its parent plus one.

    Args:
        paths: Sorted relative paths using ``/`` separators.

    Returns:
        List[str]: Outline lines, without wrapper tags.
    """
    seen_dirs: Set[str] = set()
    lines: List[str] = []

    for path in paths:
        parts = path.split(PATH_SEPARATOR)
        current = ""

        for depth, part in enumerate(parts[:-1]):
            current = part if not current else f"{current}{PATH_SEPARATOR}{part}"
            if current in seen_dirs:
                continue
            seen_dirs.add(current)
            lines.append(f"{INDENT_UNIT * depth}{ENTRY_MARKER}{part}/")

        lines.append(f"{INDENT_UNIT * (len(parts) - 1)}{ENTRY_MARKER}{parts[-1]}")

    return lines


def render_document(paths: Iterable[str], include_hidden: bool = False) -> RenderedDocument:
    """
    Sort, filter and render paths into a complete tagged document.

    Sorting is a plain code-point comparison of the full path strings, so
    ``README.md`` sorts before ``src/...`` and a file ``foo`` may land
    between entries of an unrelated ``foo-bar/`` directory.

    Args:
        paths: Tracked paths in any order.
        include_hidden: Keep paths containing dot-prefixed segments.

    Returns:
        RenderedDocument: The wrapped snapshot.
    """
    kept = sorted(filter_hidden(paths, include_hidden))

    if not kept:
        logger.info("No files matched the selection criteria.")
        return RenderedDocument(lines=(OPEN_TAG, "", EMPTY_PLACEHOLDER, CLOSE_TAG))

    body = render_tree_lines(kept)
    directory_count = len(body) - len(kept)
    logger.debug(f"Rendered {len(kept)} files in {directory_count} directories.")

    return RenderedDocument(
        lines=(OPEN_TAG, "", *body, CLOSE_TAG),
        file_count=len(kept),
        directory_count=directory_count,
    )


def generate_structure(
        include_hidden: bool = False,
        cwd: Optional[str] = None,
        list_files: FileLister = list_tracked_files,
) -> RenderedDocument:
    """
    Render the tracked file tree of the repository enclosing ``cwd``.

    Args:
        include_hidden: Keep paths containing dot-prefixed segments.
        cwd: Directory inside the working tree. Defaults to the process cwd.
        list_files: File index provider, injectable for tests.

    Returns:
        RenderedDocument: The wrapped snapshot.

    Raises:
        NotARepositoryError: If the file index cannot be obtained.
    """
    paths = list_files(cwd)
    return render_document(paths, include_hidden=include_hidden)
