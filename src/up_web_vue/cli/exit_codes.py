"""Exit-code constants used by the CLI layer.

Every exit path uses one of these values rather than a bare integer.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Sequence completed and the decision was handed over."""

CANCELLED: int = 1
"""User declined the overwrite or cancelled a prompt."""

GENERAL_ERROR: int = 1
"""A known UpWebVueError was caught. User-facing message was displayed."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C outside a prompt.  POSIX convention (128 + SIGINT=2)."""
