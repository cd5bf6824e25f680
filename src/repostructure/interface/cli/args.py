from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command line schema and translates the parsed namespace into
configuration overrides. Parse failures raise ``UnrecognizedArgumentError``
instead of exiting with argparse's default status 2.
"""

import argparse
from typing import Any, Dict, NoReturn, Optional

from repostructure import __version__
from repostructure.domain.errors import UnrecognizedArgumentError

PROG = "repo-structure"

_UNRECOGNIZED_PREFIX = "unrecognized arguments: "

# -----------------------------------------------------------------------------
# PARSER
# -----------------------------------------------------------------------------

class RepoStructureArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad input through the domain error taxonomy."""

    def error(self, message: str) -> NoReturn:
        argument = _offending_argument(message)
        if argument is not None:
            message = f"Unknown parameter: {argument}"
        raise UnrecognizedArgumentError(message, argument=argument)


def build_parser() -> RepoStructureArgumentParser:
    """
    Construct the argument parser for the repo-structure CLI.

    Returns:
        RepoStructureArgumentParser: Configured parser instance.
    """
    p = RepoStructureArgumentParser(
        prog=PROG,
        description=(
            "Generate the tracked file structure of the current git repository, "
            "wrapped in <context name=\"directoryStructure\"> tags for AI assistants."
        ),
        allow_abbrev=False,
    )

    # --- Tree content ---
    p.add_argument(
        "-a", "--all",
        dest="include_hidden",
        action="store_true",
        help="Include hidden files and directories (starting with '.')",
    )

    # --- Delivery ---
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        metavar="PATH",
        default=None,
        help="Output to a file instead of stdout (e.g., -o structure.xml)",
    )
    p.add_argument(
        "--no-clipboard",
        action="store_true",
        help="Do not copy the structure to the system clipboard",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        metavar="PATH",
        default=None,
        help="Also write log records to a rotating file at PATH.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Flags that were not given map to None so the defaults survive the merge.

    Args:
        args: Parsed command line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "include_hidden": True if args.include_hidden else None,
        "output_path": args.output_path,
        "copy_to_clipboard": False if args.no_clipboard else None,
    }
    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _offending_argument(message: str) -> Optional[str]:
    """Extract the first unknown token from an argparse error message."""
    if not message.startswith(_UNRECOGNIZED_PREFIX):
        return None
    tokens = message[len(_UNRECOGNIZED_PREFIX):].split()
    return tokens[0] if tokens else None
