"""CLI application entry point for up-web-vue.

This module is the **sole error boundary** for the entire application.
It catches :class:`~up_web_vue.exceptions.UpWebVueError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No sequencing logic lives here: stages and their ordering belong to
  the core layer.
* A user declining the overwrite arrives as a
  :class:`~up_web_vue.core.models.Cancelled` outcome and is handled
  in :func:`main`, not by catching an exception.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from up_web_vue.cli import exit_codes
from up_web_vue.cli.console import console
from up_web_vue.core.models import Cancelled, CancelReason
from up_web_vue.core.protocols import Prompter
from up_web_vue.exceptions import UpWebVueError
from up_web_vue.version import __version__

logger = logging.getLogger(__name__)

_EPILOG = """\
flags:
  --force                      skip the overwrite confirmation
  --typescript, --ts, --TS     enable TypeScript in the template
  --with-tests, --tests        add unit testing support
  --router, --vue-router       add Vue Router
  --verbose, -v                show progress logging

Any other --flag is accepted and passed on to the template step.
Set UP_WEB_VUE_DEBUG=1 for debug logging.
"""

_CANCEL_MESSAGES: dict[CancelReason, str] = {
    CancelReason.DECLINED: "❌[red] Operation cancelled[/red]",
    CancelReason.INTERRUPTED: "[red]✖[/red] Operation cancelled",
}


# ---------------------------------------------------------------------------
# Bootstrap parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the bootstrap parser.

    Only ``--help`` and ``--version`` are handled here; every other
    token is left for :func:`~up_web_vue.core.arguments.parse_arguments`.
    """
    parser = argparse.ArgumentParser(
        prog="up-web-vue",
        usage="%(prog)s [project-name] [--flags]",
        description="Create a new web project from the up-web-vue template.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def _report_cancellation(reason: CancelReason) -> int:
    console.print(_CANCEL_MESSAGES[reason])
    return exit_codes.CANCELLED


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    prompter: Prompter | None = None,
    cwd: Path | None = None,
) -> int:
    """Run the up-web-vue CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    prompter:
        Question backend.  Defaults to
        :class:`~up_web_vue.cli.prompter.QuestionaryPrompter`.
    cwd:
        Directory the project is created in.  Defaults to the process
        working directory.

    Returns
    -------
    int
        OS process exit code.
    """
    from up_web_vue.cli.banner import print_banner
    from up_web_vue.cli.logging_setup import setup_logging
    from up_web_vue.cli.summary import render_decision
    from up_web_vue.core.arguments import parse_arguments
    from up_web_vue.core.sequencer import run_sequence
    from up_web_vue.core.stages import build_stages, create_state
    from up_web_vue.infra.target_probe import probe_target

    parser = _build_parser()
    _, remaining = parser.parse_known_args(argv)
    options = parse_arguments(remaining)

    setup_logging(verbose=options.verbose)
    working_dir = cwd if cwd is not None else Path.cwd()
    print_banner(working_dir)

    if prompter is None:
        from up_web_vue.cli.prompter import QuestionaryPrompter

        prompter = QuestionaryPrompter()

    state = create_state(options)
    outcome = run_sequence(build_stages(), state, prompter, options)

    if isinstance(outcome, Cancelled):
        return _report_cancellation(outcome.reason)

    decision = outcome.decision
    logger.info("Target directory: %s", decision.project_name)
    status = probe_target(decision.project_name, working_dir)
    render_decision(decision, status)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except UpWebVueError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n" + _CANCEL_MESSAGES[CancelReason.INTERRUPTED])
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            f"[bold red](〃￣︶￣) Emm, Error occurs: "
            f"{type(exc).__name__}: {exc}[/bold red]"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
