"""Domain models for up-web-vue.

Value objects are frozen dataclasses.  :class:`SequenceState` is the
one deliberate exception: it is the mutable accumulator threaded
through the prompt stages of a single invocation.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


# ---------------------------------------------------------------------------
# Parsed command line
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParsedArguments:
    """Structured view of the raw command-line tokens.

    ``flags`` is keyed by canonical flag name; alias names never appear
    as keys.  ``aliases`` maps every alias back to its canonical name so
    :meth:`flag` accepts either spelling.
    """

    positionals: tuple[str, ...]
    """Tokens not attached to any flag, kept verbatim as strings."""

    flags: Mapping[str, bool]
    """Canonical flag name -> boolean."""

    aliases: Mapping[str, str] = field(default_factory=dict)
    """Alias name -> canonical name."""

    def flag(self, name: str) -> bool:
        """Return the boolean for *name* (canonical or alias), ``False`` if absent."""
        return self.flags.get(self.aliases.get(name, name), False)

    @property
    def project_name(self) -> str | None:
        return self.positionals[0] if self.positionals else None

    @property
    def force(self) -> bool:
        return self.flag("force")

    @property
    def typescript(self) -> bool:
        return self.flag("typescript")

    @property
    def with_tests(self) -> bool:
        return self.flag("with-tests")

    @property
    def router(self) -> bool:
        return self.flag("router")

    @property
    def verbose(self) -> bool:
        return self.flag("verbose")


# ---------------------------------------------------------------------------
# Sequence state
# ---------------------------------------------------------------------------

class PromptKind(enum.Enum):
    """How an active stage is presented to the user."""

    TEXT = "text"
    CONFIRM = "confirm"


@dataclass(slots=True)
class SequenceState:
    """Mutable accumulator for one run of the prompt sequence."""

    target_dir: str
    default_project_name: str
    name_supplied: bool
    force: bool
    answers: dict[str, Any] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Decision:
    """Final answer set handed to the template materialisation step."""

    project_name: str
    """Resolved target directory name."""

    should_overwrite: bool | None
    """User's overwrite answer, or ``None`` when the stage was skipped."""

    force: bool
    """Whether ``--force`` pre-authorised the overwrite."""

    options: ParsedArguments
    """Raw parsed flags for downstream collaborators."""

    @property
    def overwrite_authorized(self) -> bool:
        return self.force or self.should_overwrite is True


class CancelReason(enum.Enum):
    """Why a sequence stopped before producing a :class:`Decision`."""

    DECLINED = "declined"
    """User answered "no" to the overwrite confirmation."""

    INTERRUPTED = "interrupted"
    """User aborted an active prompt (Ctrl+C / Esc)."""


@dataclass(frozen=True, slots=True)
class Completed:
    decision: Decision


@dataclass(frozen=True, slots=True)
class Cancelled:
    reason: CancelReason


SequenceOutcome = Completed | Cancelled
