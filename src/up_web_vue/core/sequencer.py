"""Interactive prompt sequencer.

Runs stages strictly in order against a single :class:`SequenceState`
and reports the result as a typed :class:`SequenceOutcome` instead of
raising on an expected user decline.

Guarantees
----------
* No ``print()``: all user interaction goes through the injected
  :class:`~up_web_vue.core.protocols.Prompter`.
* A skipped stage contributes no entry to ``state.answers``.
* A :class:`Decision` is produced only when every stage resolved.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import partial
from typing import Any

from up_web_vue.core.models import (
    Cancelled,
    CancelReason,
    Completed,
    Decision,
    ParsedArguments,
    PromptKind,
    SequenceOutcome,
    SequenceState,
)
from up_web_vue.core.protocols import Prompter
from up_web_vue.core.stages import SHOULD_OVERWRITE, GateStage, PromptStage, Stage

logger = logging.getLogger(__name__)


def _ask(stage: PromptStage, kind: PromptKind, state: SequenceState, prompter: Prompter) -> Any:
    message = stage.render_message(state)
    initial = stage.initial(state) if stage.initial is not None else None

    if kind is PromptKind.TEXT:
        on_change = partial(stage.on_state, state) if stage.on_state is not None else None
        return prompter.ask_text(
            message,
            default="" if initial is None else str(initial),
            on_change=on_change,
        )

    return prompter.ask_confirm(message, default=bool(initial))


def run_sequence(
    stages: Sequence[Stage],
    state: SequenceState,
    prompter: Prompter,
    options: ParsedArguments,
) -> SequenceOutcome:
    """Run *stages* in order and return the outcome.

    Parameters
    ----------
    stages:
        Ordered stage definitions, typically from
        :func:`~up_web_vue.core.stages.build_stages`.
    state:
        Accumulator seeded by :func:`~up_web_vue.core.stages.create_state`.
        Mutated in place.
    prompter:
        Backend used for every active prompt stage.
    options:
        Parsed flags carried through to the :class:`Decision`.

    Returns
    -------
    SequenceOutcome
        :class:`Completed` with the decision, or :class:`Cancelled`
        when the user declines the overwrite or aborts a prompt.
    """
    logger.debug("forceOverwrite: %s", state.force)

    for stage in stages:
        if isinstance(stage, GateStage):
            reason = stage.check(state)
            if reason is not None:
                logger.debug("Stage %s cancelled the sequence (%s)", stage.name, reason.value)
                return Cancelled(reason)
            continue

        kind = stage.kind(state)
        if kind is None:
            logger.debug("Stage %s skipped", stage.name)
            continue

        answer = _ask(stage, kind, state, prompter)
        if answer is None:
            logger.debug("Stage %s aborted by user", stage.name)
            return Cancelled(CancelReason.INTERRUPTED)

        if stage.on_state is not None:
            stage.on_state(state, answer)
        state.answers[stage.name] = answer

    decision = Decision(
        project_name=state.target_dir,
        should_overwrite=state.answers.get(SHOULD_OVERWRITE),
        force=state.force,
        options=options,
    )
    logger.debug("result: %s", decision)
    return Completed(decision)
