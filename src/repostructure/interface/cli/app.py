from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates one invocation: argument parsing, logging bootstrap,
configuration merge, precondition checks, rendering and delivery. Domain
errors are converted to exit codes here.
"""

import sys
from typing import List, Optional

from repostructure.core.delivery import deliver
from repostructure.core.tree_renderer import generate_structure
from repostructure.domain.config import get_default_config, merge_config
from repostructure.domain.errors import (
    NotARepositoryError,
    RepoStructureError,
    UnrecognizedArgumentError,
)
from repostructure.infra.clipboard import detect_clipboard_sink
from repostructure.infra.git import NOT_A_REPOSITORY_MESSAGE, is_inside_work_tree
from repostructure.infra.logging import LoggingConfig, configure_logging, get_logger
from repostructure.infra.runtime import check_runtime
from repostructure.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv[1:].

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    if sys.platform == "win32" and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    try:
        args = parser.parse_args(argv)
    except UnrecognizedArgumentError as e:
        print(str(e), file=sys.stderr)
        parser.print_help(sys.stderr)
        return e.exit_code
    except SystemExit as e:
        # --help and --version exit through argparse
        return int(e.code or 0)

    # 2. Logging bootstrap (stderr, plus an optional rotating file)
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # 3. Configuration merge
    conf = merge_config(get_default_config(), cli_args.args_to_overrides(args))
    logger.debug(f"Effective configuration: {conf}")

    # 4. Render and deliver
    try:
        return _run(conf)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130
    except RepoStructureError as e:
        logger.debug(f"{type(e).__name__}: {e}")
        print(str(e), file=sys.stderr)
        return e.exit_code


def _run(conf: dict) -> int:
    """Run the precondition checks, render the tree and deliver it."""
    if not is_inside_work_tree():
        raise NotARepositoryError(NOT_A_REPOSITORY_MESSAGE)

    sink = detect_clipboard_sink() if conf["copy_to_clipboard"] else None
    check_runtime()

    document = generate_structure(include_hidden=conf["include_hidden"])
    if document.is_empty:
        logger.debug("No tracked files matched; rendering the placeholder.")
    else:
        logger.debug(
            f"Snapshot ready: {document.file_count} files, "
            f"{document.directory_count} directories."
        )

    report = deliver(
        document,
        output_path=conf["output_path"],
        copy_to_clipboard=conf["copy_to_clipboard"],
        sink=sink,
    )
    logger.debug(
        f"Delivery finished: file={report.output_path}, stdout={report.wrote_stdout}, "
        f"clipboard={report.copied_to_clipboard}, warnings={len(report.warnings)}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
