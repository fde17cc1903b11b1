"""Shared pytest fixtures and configuration for the up-web-vue test suite.

Guidelines
----------
* No real terminal interaction; prompts are answered by a scripted fake.
* Core tests must be pure, with no side effects.
* Filesystem tests use ``tmp_path`` only.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

import pytest


class ScriptedPrompter:
    """Prompter fake that replays pre-recorded answers.

    Text answers are fed to ``on_change`` one character at a time before
    being returned, mimicking keystrokes.
    """

    def __init__(
        self,
        *,
        texts: Iterable[str | None] = (),
        confirms: Iterable[bool | None] = (),
    ) -> None:
        self._texts = list(texts)
        self._confirms = list(confirms)
        self.calls: list[tuple[str, str]] = []
        self.text_defaults: list[str] = []
        self.confirm_defaults: list[bool] = []
        self.observed: list[str] = []

    def ask_text(
        self,
        message: str,
        *,
        default: str,
        on_change: Callable[[str], None] | None = None,
    ) -> str | None:
        self.calls.append(("text", message))
        self.text_defaults.append(default)
        answer = self._texts.pop(0)
        if answer is not None and on_change is not None:
            for end in range(len(answer) + 1):
                self.observed.append(answer[:end])
                on_change(answer[:end])
        return answer

    def ask_confirm(self, message: str, *, default: bool) -> bool | None:
        self.calls.append(("confirm", message))
        self.confirm_defaults.append(default)
        return self._confirms.pop(0)


@pytest.fixture()
def make_prompter() -> Callable[..., ScriptedPrompter]:
    def factory(**kwargs: Any) -> ScriptedPrompter:
        return ScriptedPrompter(**kwargs)

    return factory
