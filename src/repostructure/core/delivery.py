from __future__ import annotations

"""
Output Delivery.

Routes a rendered document to its sinks: standard output, an optional
file and the system clipboard. Clipboard problems are reported as warnings
and never abort delivery.
"""

import logging
import os
import sys
from dataclasses import dataclass, field
from typing import List, Optional, TextIO

from repostructure.domain.errors import ClipboardUnavailableError, OutputWriteError
from repostructure.domain.tree_models import RenderedDocument
from repostructure.infra.clipboard import ClipboardSink

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# USER-FACING MESSAGES
# -----------------------------------------------------------------------------

MSG_SAVED = "Repository structure saved to {path}"
MSG_ALSO_COPIED = "Also copied to clipboard!"
MSG_COPIED = "Structure copied to clipboard!"
WARN_NO_CLIPBOARD_FOR_FILE = (
    "Warning: Clipboard copy requested but no clipboard command found for your OS."
)
WARN_NO_CLIPBOARD_FOR_STDOUT = (
    "Warning: No clipboard command found for your OS. Displaying output instead."
)
WARN_COPY_FAILED = "Warning: Could not copy to clipboard: {error}"

# -----------------------------------------------------------------------------
# RESULT MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DeliveryReport:
    """
    Outcome of a delivery run.

    Attributes:
        output_path: Absolute path of the written file, if any.
        wrote_stdout: Whether the document itself was printed.
        copied_to_clipboard: Whether a clipboard sink accepted the text.
        warnings: Non-fatal problems reported to the user.
    """
    output_path: Optional[str] = None
    wrote_stdout: bool = False
    copied_to_clipboard: bool = False
    warnings: List[str] = field(default_factory=list)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def deliver(
        document: RenderedDocument,
        output_path: Optional[str] = None,
        copy_to_clipboard: bool = True,
        sink: Optional[ClipboardSink] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
) -> DeliveryReport:
    """
    Deliver ``document`` to the selected sinks.

    With ``output_path`` the document goes to the file only, and the file's
    contents are then copied to the clipboard. Without it the document is
    printed and, when a sink exists, duplicated to the clipboard.

    Args:
        document: Rendered snapshot.
        output_path: Optional destination file.
        copy_to_clipboard: Whether clipboard delivery is wanted.
        sink: Clipboard sink selected at startup, or None.
        stdout: Stream for the document and status lines.
        stderr: Stream for warnings.

    Returns:
        DeliveryReport: What was delivered where.

    Raises:
        OutputWriteError: If ``output_path`` cannot be written.
    """
    out = stdout or sys.stdout
    err = stderr or sys.stderr
    warnings: List[str] = []

    if output_path:
        written = _write_file(document, output_path)
        print(MSG_SAVED.format(path=output_path), file=out)

        copied = False
        if copy_to_clipboard:
            if sink is None:
                _warn(WARN_NO_CLIPBOARD_FOR_FILE, warnings, err)
            else:
                copied = _send(sink, _read_back(written), warnings, err)
                if copied:
                    print(MSG_ALSO_COPIED, file=out)

        return DeliveryReport(
            output_path=written,
            wrote_stdout=False,
            copied_to_clipboard=copied,
            warnings=warnings,
        )

    if copy_to_clipboard and sink is None:
        _warn(WARN_NO_CLIPBOARD_FOR_STDOUT, warnings, err)

    out.write(document.text)
    out.flush()

    copied = False
    if copy_to_clipboard and sink is not None:
        copied = _send(sink, document.text, warnings, err)
        if copied:
            print(f"\n{MSG_COPIED}", file=out)

    return DeliveryReport(
        output_path=None,
        wrote_stdout=True,
        copied_to_clipboard=copied,
        warnings=warnings,
    )

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _write_file(document: RenderedDocument, output_path: str) -> str:
    """Write the document as UTF-8 and return the absolute path."""
    target = os.path.abspath(output_path)
    try:
        with open(target, "w", encoding="utf-8", newline="\n") as fh:
            fh.write(document.text)
    except OSError as e:
        raise OutputWriteError(f"Error: Could not write to '{output_path}': {e}") from e

    logger.debug(f"Wrote {len(document.lines)} lines to {target}")
    return target


def _read_back(path: str) -> str:
    with open(path, "r", encoding="utf-8") as fh:
        return fh.read()


def _send(sink: ClipboardSink, text: str, warnings: List[str], err: TextIO) -> bool:
    try:
        sink.send(text)
    except ClipboardUnavailableError as e:
        _warn(WARN_COPY_FAILED.format(error=e), warnings, err)
        return False
    return True


def _warn(message: str, warnings: List[str], err: TextIO) -> None:
    logger.debug(message)
    warnings.append(message)
    print(message, file=err)
