from __future__ import annotations

"""
Runtime Configuration Defaults.

The tool keeps no persistent state: the session configuration is the
default dictionary below, overridden by command line flags.
"""

from typing import Any, Dict

# Keys the CLI is allowed to override
CONFIG_KEYS = ("include_hidden", "output_path", "copy_to_clipboard")


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Tree content
        "include_hidden": False,

        # Delivery
        "output_path": None,
        "copy_to_clipboard": True,
    }


def merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge known override keys into a copy of the base configuration.

    ``None`` values are treated as "not provided" and leave the base intact.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k in CONFIG_KEYS:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out
