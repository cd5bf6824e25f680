from __future__ import annotations

"""
Runtime Capability Guard.

Verifies the interpreter meets the minimum version before any work is
done. Every supported Python ships native ``set``/``dict`` types, so the
check only fails on interpreters the package does not install on.
"""

import logging
import sys
from typing import Sequence, Tuple

from repostructure.domain.errors import UnsupportedRuntimeError

logger = logging.getLogger(__name__)

MIN_PYTHON: Tuple[int, int] = (3, 8)


def check_runtime(version_info: Sequence[int] = tuple(sys.version_info)) -> None:
    """
    Raise if the interpreter is older than ``MIN_PYTHON``.

    Args:
        version_info: Interpreter version tuple, overridable for tests.

    Raises:
        UnsupportedRuntimeError: When the version is below the minimum.
    """
    current = tuple(version_info[:2])
    if current < MIN_PYTHON:
        required = ".".join(str(p) for p in MIN_PYTHON)
        found = ".".join(str(p) for p in current)
        raise UnsupportedRuntimeError(
            f"This tool requires Python {required} or higher (found {found})."
        )
    logger.debug(f"Runtime check passed (Python {current[0]}.{current[1]}).")
