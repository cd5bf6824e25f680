from __future__ import annotations

"""
Domain Error Taxonomy.

Defines the exception hierarchy shared by the renderer, the infrastructure
adapters and the CLI controller. Every fatal error carries the process exit
code the CLI must return when it surfaces.
"""


class RepoStructureError(Exception):
    """
    Base class for every expected failure of the tool.

    Attributes:
        exit_code: Process exit status associated with the failure.
    """
    exit_code: int = 1


class NotARepositoryError(RepoStructureError):
    """The current directory is not inside a git working tree."""


class UnsupportedRuntimeError(RepoStructureError):
    """The running interpreter does not meet the minimum version."""


class UnrecognizedArgumentError(RepoStructureError):
    """
    A command line argument could not be parsed.

    Attributes:
        argument: The offending token, when it is known.
    """

    def __init__(self, message: str, argument: str | None = None):
        super().__init__(message)
        self.argument = argument


class OutputWriteError(RepoStructureError):
    """The rendered document could not be written to the requested file."""


class ClipboardUnavailableError(RepoStructureError):
    """
    The clipboard command is missing or failed.

    Never fatal: delivery logs a warning and continues with the other sinks.
    """
    exit_code = 0
