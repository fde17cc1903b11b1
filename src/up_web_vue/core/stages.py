"""Stage definitions for the project setup sequence.

A stage is either a :class:`PromptStage`, shown to the user when its
activation predicate returns a :class:`PromptKind`, or a
:class:`GateStage`, which is never shown and may end the sequence.
Messages, predicates and observers receive the current
:class:`SequenceState` explicitly; none of them close over outer
variables.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from up_web_vue.core.models import (
    CancelReason,
    ParsedArguments,
    PromptKind,
    SequenceState,
)

DEFAULT_PROJECT_NAME: str = "up-web-vue"
CURRENT_DIRECTORY: str = "."

PROJECT_NAME: str = "project_name"
SHOULD_OVERWRITE: str = "should_overwrite"
OVERWRITE_CHECKER: str = "overwrite_checker"


@dataclass(frozen=True, slots=True)
class PromptStage:
    """A question presented to the user when active."""

    name: str
    kind: Callable[[SequenceState], PromptKind | None]
    message: str | Callable[[SequenceState], str]
    initial: Callable[[SequenceState], Any] | None = None
    on_state: Callable[[SequenceState, Any], None] | None = None

    def render_message(self, state: SequenceState) -> str:
        if callable(self.message):
            return self.message(state)
        return self.message


@dataclass(frozen=True, slots=True)
class GateStage:
    """A silent stage that inspects prior answers and may cancel."""

    name: str
    check: Callable[[SequenceState], CancelReason | None]


Stage = PromptStage | GateStage


# ---------------------------------------------------------------------------
# State construction
# ---------------------------------------------------------------------------

def create_state(options: ParsedArguments) -> SequenceState:
    """Seed a fresh :class:`SequenceState` from parsed options.

    A positional project name is used verbatim, without trimming.
    """
    supplied = options.project_name
    return SequenceState(
        target_dir=supplied if supplied else DEFAULT_PROJECT_NAME,
        default_project_name=supplied if supplied else DEFAULT_PROJECT_NAME,
        name_supplied=bool(supplied),
        force=options.force,
    )


# ---------------------------------------------------------------------------
# S0 — project name
# ---------------------------------------------------------------------------

def _project_name_kind(state: SequenceState) -> PromptKind | None:
    return None if state.name_supplied else PromptKind.TEXT


def _project_name_initial(state: SequenceState) -> str:
    return state.default_project_name


def track_project_name(state: SequenceState, value: Any) -> None:
    """Update the target directory from the text buffer.

    Blank input falls back to the default project name.
    """
    state.target_dir = str(value).strip() or state.default_project_name


# ---------------------------------------------------------------------------
# S1 — overwrite confirmation
# ---------------------------------------------------------------------------

def _overwrite_kind(state: SequenceState) -> PromptKind | None:
    return None if state.force else PromptKind.CONFIRM


def overwrite_message(state: SequenceState) -> str:
    """Describe the resolved target directory for the overwrite question."""
    if state.target_dir == CURRENT_DIRECTORY:
        dir_for_prompt = "Current directory"
    else:
        dir_for_prompt = f'Target directory "{state.target_dir}"'
    return f"{dir_for_prompt} is not empty. Remove existing files and continue?"


# ---------------------------------------------------------------------------
# S2 — overwrite checker
# ---------------------------------------------------------------------------

def check_overwrite(state: SequenceState) -> CancelReason | None:
    # Only an explicit "no" cancels; a skipped stage records nothing.
    if state.answers.get(SHOULD_OVERWRITE) is False:
        return CancelReason.DECLINED
    return None


def build_stages() -> tuple[Stage, ...]:
    """Return the ordered project setup stages."""
    return (
        PromptStage(
            name=PROJECT_NAME,
            kind=_project_name_kind,
            message="Please input project name",
            initial=_project_name_initial,
            on_state=track_project_name,
        ),
        PromptStage(
            name=SHOULD_OVERWRITE,
            kind=_overwrite_kind,
            message=overwrite_message,
        ),
        GateStage(name=OVERWRITE_CHECKER, check=check_overwrite),
    )
