from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Installs a last-resort exception hook so unexpected crashes are logged
and reported on stderr with exit status 1, then delegates to the CLI
controller.
"""

import logging
import sys
import traceback
from types import TracebackType
from typing import Optional, Type


def global_exception_handler(
        exctype: Type[BaseException],
        value: BaseException,
        tb: Optional[TracebackType],
) -> None:
    """
    Report an unhandled exception and terminate with status 1.

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
    """
    if issubclass(exctype, KeyboardInterrupt):
        sys.__excepthook__(exctype, value, tb)
        return

    stack_trace = "".join(traceback.format_exception(exctype, value, tb))
    logging.getLogger("repostructure.supervisor").critical(
        f"FATAL EXCEPTION DETECTED: {value}"
    )

    print("\n" + "=" * 80, file=sys.stderr)
    print("CRITICAL ERROR (REPO-STRUCTURE)", file=sys.stderr)
    print("=" * 80, file=sys.stderr)
    print(stack_trace, file=sys.stderr)
    sys.exit(1)


sys.excepthook = global_exception_handler


def main() -> int:
    """
    Run the CLI and route unexpected failures through the supervisor.

    Returns:
        int: Process exit code.
    """
    from repostructure.interface.cli.app import main as cli_main

    try:
        return cli_main()
    except Exception as e:
        global_exception_handler(type(e), e, e.__traceback__)
        return 1


if __name__ == "__main__":
    sys.exit(main())
