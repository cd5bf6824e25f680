from __future__ import annotations

"""
repo-structure: tagged snapshot of a git project's tracked file tree.

Renders the output of ``git ls-files`` as an indented list wrapped in a
``<context name="directoryStructure">`` block, ready to be pasted into an
AI assistant conversation.
"""

__version__ = "0.1.0"
