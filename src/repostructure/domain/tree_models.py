from __future__ import annotations

"""
Directory Structure Document Models.

Holds the fixed wrapper tags of the snapshot format and the immutable
document object handed from the renderer to the output sinks.
"""

from dataclasses import dataclass
from typing import Tuple

# -----------------------------------------------------------------------------
# DOCUMENT FORMAT CONSTANTS
# -----------------------------------------------------------------------------

CONTEXT_NAME = "directoryStructure"
CONTEXT_DESCRIPTION = (
    "Below is a snapshot of this project root file structure (git ls-files) "
    "at the start of the conversation. This snapshot will NOT update during "
    "the conversation."
)
OPEN_TAG = f'<context name="{CONTEXT_NAME}" description="{CONTEXT_DESCRIPTION}">'
CLOSE_TAG = "</context>"
EMPTY_PLACEHOLDER = "# (No files found matching criteria)"

INDENT_UNIT = "  "
ENTRY_MARKER = "- "
HIDDEN_MARKER = "."
PATH_SEPARATOR = "/"

# -----------------------------------------------------------------------------
# RENDERED DOCUMENT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class RenderedDocument:
    """
    Final snapshot ready for delivery.

    Attributes:
        lines: Ordered output lines, wrapper tags included.
        file_count: Number of leaf (file) lines in the body.
        directory_count: Number of directory header lines in the body.
    """
    lines: Tuple[str, ...]
    file_count: int = 0
    directory_count: int = 0

    @property
    def text(self) -> str:
        """Newline-joined document, terminated by a trailing newline."""
        return "\n".join(self.lines) + "\n"

    @property
    def body(self) -> Tuple[str, ...]:
        """Lines between the opening blank line and the closing tag."""
        return self.lines[2:-1]

    @property
    def is_empty(self) -> bool:
        return self.file_count == 0
