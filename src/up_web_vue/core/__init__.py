"""Core layer — argument parsing, stage definitions, and the sequencer.

Rules
-----
* No ``print()`` calls.
* No filesystem or terminal I/O.
* No imports from ``cli`` or ``infra``.
"""

from up_web_vue.core.arguments import CLI_ARGUMENT_CONFIG, ArgumentConfig, parse_arguments
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
from up_web_vue.core.sequencer import run_sequence
from up_web_vue.core.stages import (
    DEFAULT_PROJECT_NAME,
    GateStage,
    PromptStage,
    build_stages,
    create_state,
)

__all__: list[str] = [
    "ArgumentConfig",
    "CLI_ARGUMENT_CONFIG",
    "CancelReason",
    "Cancelled",
    "Completed",
    "DEFAULT_PROJECT_NAME",
    "Decision",
    "GateStage",
    "ParsedArguments",
    "PromptKind",
    "PromptStage",
    "Prompter",
    "SequenceOutcome",
    "SequenceState",
    "build_stages",
    "create_state",
    "parse_arguments",
    "run_sequence",
]
