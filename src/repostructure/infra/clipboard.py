from __future__ import annotations

"""
Clipboard Sink Strategies.

Each sink wraps one platform clipboard command that reads text from its
standard input. ``detect_clipboard_sink`` inspects the host once at startup
and returns the first usable sink for the platform, or None.
"""

import logging
import shutil
import subprocess
import sys
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Sequence, Type

from repostructure.domain.errors import ClipboardUnavailableError

logger = logging.getLogger(__name__)

WhichFunc = Callable[[str], Optional[str]]

# -----------------------------------------------------------------------------
# STRATEGY INTERFACE
# -----------------------------------------------------------------------------

class ClipboardSink(ABC):
    """
    Abstract clipboard command.

    Attributes:
        name: Short identifier used in log messages.
        command: argv of the clipboard program.
    """
    name: str = ""
    command: Sequence[str] = ()

    @property
    def executable(self) -> str:
        return self.command[0]

    def is_available(self, which: WhichFunc = shutil.which) -> bool:
        """Return True if the executable is found on PATH."""
        return which(self.executable) is not None

    @abstractmethod
    def send(self, text: str) -> None:
        """
        Place ``text`` on the system clipboard.

        Raises:
            ClipboardUnavailableError: If the command is missing or fails.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}({' '.join(self.command)!r})"


class CommandClipboardSink(ClipboardSink):
    """Sink that pipes text to an external program's standard input."""

    def send(self, text: str) -> None:
        try:
            proc = subprocess.run(
                list(self.command),
                input=text,
                text=True,
                encoding="utf-8",
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as e:
            raise ClipboardUnavailableError(
                f"Clipboard command '{self.executable}' could not be started: {e}"
            ) from e

        if proc.returncode != 0:
            raise ClipboardUnavailableError(
                f"Clipboard command '{self.executable}' exited with status {proc.returncode}"
            )
        logger.debug(f"Sent {len(text)} characters to {self.name}.")

# -----------------------------------------------------------------------------
# PLATFORM VARIANTS
# -----------------------------------------------------------------------------

class PbcopySink(CommandClipboardSink):
    name = "pbcopy"
    command = ("pbcopy",)


class XclipSink(CommandClipboardSink):
    name = "xclip"
    command = ("xclip", "-selection", "clipboard")


class XselSink(CommandClipboardSink):
    name = "xsel"
    command = ("xsel", "--clipboard", "--input")


class WindowsClipSink(CommandClipboardSink):
    name = "clip"
    command = ("clip",)

# -----------------------------------------------------------------------------
# DETECTION
# -----------------------------------------------------------------------------

def candidate_sinks(platform: Optional[str] = None) -> List[Type[ClipboardSink]]:
    """
    Return the sink classes to try for a platform, in preference order.

    Args:
        platform: ``sys.platform`` style identifier. Defaults to the host.

    Returns:
        List[Type[ClipboardSink]]: Possibly empty preference list.
    """
    plat = (platform if platform is not None else sys.platform).lower()

    if plat.startswith("darwin"):
        return [PbcopySink]
    if plat.startswith("linux"):
        return [XclipSink, XselSink]
    if plat in ("win32", "cygwin", "msys"):
        return [WindowsClipSink]
    return []


def detect_clipboard_sink(
        platform: Optional[str] = None,
        which: WhichFunc = shutil.which,
) -> Optional[ClipboardSink]:
    """
    Select the clipboard sink for the host.

    macOS and Windows commands ship with the OS and are selected without a
    PATH lookup. On Linux the first of xclip/xsel found on PATH wins.

    Args:
        platform: ``sys.platform`` style identifier. Defaults to the host.
        which: PATH lookup function, injectable for tests.

    Returns:
        Optional[ClipboardSink]: The selected sink, or None if none is usable.
    """
    plat = (platform if platform is not None else sys.platform).lower()
    candidates = candidate_sinks(plat)
    search_path = plat.startswith("linux")

    for sink_cls in candidates:
        sink = sink_cls()
        if not search_path or sink.is_available(which):
            logger.debug(f"Clipboard sink selected: {sink!r}")
            return sink

    logger.debug(f"No clipboard sink available for platform '{plat}'.")
    return None
