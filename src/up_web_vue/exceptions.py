"""Custom exception hierarchy for up-web-vue.

Every failure that reaches the CLI error boundary is a subclass of
:class:`UpWebVueError`.  A user declining the overwrite is *not* an
error: the sequencer reports it as a
:class:`~up_web_vue.core.models.Cancelled` outcome.

Hierarchy
---------
UpWebVueError
├── EnvironmentError
├── PromptError
└── TargetProbeError
"""

from __future__ import annotations


class UpWebVueError(Exception):
    """Base exception for all up-web-vue errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


class EnvironmentError(UpWebVueError):
    """Raised when an optional UI dependency (rich, questionary) is missing."""


class PromptError(UpWebVueError):
    """Raised when the interactive terminal channel fails."""


class TargetProbeError(UpWebVueError):
    """Raised when the target directory cannot be inspected."""
