"""questionary-backed :class:`~up_web_vue.core.protocols.Prompter`.

This module owns every terminal question asked by up-web-vue.  It
holds no sequencing logic: which questions are asked, and in what
order, is decided by :mod:`up_web_vue.core.sequencer`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from up_web_vue.exceptions import EnvironmentError, PromptError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _observing_validator(on_change: Callable[[str], None]) -> Callable[[str], bool]:
    """Wrap *on_change* as an always-valid questionary validator.

    questionary re-validates the buffer on every keystroke, which makes
    the validator hook a convenient change observer.
    """

    def validate(text: str) -> bool:
        on_change(text)
        return True

    return validate


class QuestionaryPrompter:
    """Ask questions on the current terminal via questionary."""

    def ask_text(
        self,
        message: str,
        *,
        default: str,
        on_change: Callable[[str], None] | None = None,
    ) -> str | None:
        questionary = _import_questionary()
        kwargs: dict[str, Any] = {"default": default}
        if on_change is not None:
            kwargs["validate"] = _observing_validator(on_change)
        return self._ask(questionary.text(message, **kwargs))

    def ask_confirm(self, message: str, *, default: bool) -> bool | None:
        questionary = _import_questionary()
        return self._ask(questionary.confirm(message, default=default))

    @staticmethod
    def _ask(question: Any) -> Any:
        # ``ask()`` returns None on Ctrl+C / Esc.
        try:
            return question.ask()
        except (OSError, EOFError) as exc:
            raise PromptError(
                f"Interactive prompt failed: {exc}",
                hint="Run up-web-vue from an interactive terminal, "
                "or pass the project name and --force.",
            ) from exc
