"""Protocols (interfaces) consumed by the core layer.

The sequencer depends only on :class:`Prompter`; the questionary-backed
implementation lives in the CLI layer and tests supply scripted fakes.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


class Prompter(Protocol):
    """Contract for interactive question backends.

    Both methods return ``None`` when the user aborts the prompt
    (Ctrl+C / Esc).  Terminal failures must surface as
    :class:`~up_web_vue.exceptions.PromptError`.
    """

    def ask_text(
        self,
        message: str,
        *,
        default: str,
        on_change: Callable[[str], None] | None = None,
    ) -> str | None:
        """Ask for a line of text.

        Parameters
        ----------
        message:
            Question shown to the user.
        default:
            Pre-filled value accepted by pressing Enter.
        on_change:
            Optional observer invoked with the current buffer whenever
            it changes, before submission.
        """
        ...  # pragma: no cover

    def ask_confirm(self, message: str, *, default: bool) -> bool | None:
        """Ask a yes/no question."""
        ...  # pragma: no cover
