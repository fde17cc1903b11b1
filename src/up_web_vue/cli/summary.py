"""Rendering of the final :class:`~up_web_vue.core.models.Decision`.

Shows the user what will be handed to the template step.  Pure
presentation; the decision itself is not modified.
"""

from __future__ import annotations

from typing import Any

from up_web_vue.cli.console import console
from up_web_vue.core.models import Decision
from up_web_vue.exceptions import EnvironmentError
from up_web_vue.infra.target_probe import TargetStatus


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms — no I/O themselves)
# ---------------------------------------------------------------------------

def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


def _overwrite_label(decision: Decision) -> str:
    """Render the overwrite answer, distinguishing a ``--force`` skip."""
    if decision.should_overwrite is None:
        return "skipped (--force)" if decision.force else "skipped"
    return _yes_no(decision.should_overwrite)


def _target_state_label(status: TargetStatus) -> str:
    if not status.exists:
        return "will be created"
    if not status.is_directory:
        return "not a directory"
    return "empty" if status.is_empty else "not empty"


def summary_rows(decision: Decision, status: TargetStatus) -> list[tuple[str, str]]:
    """Return the ``(label, value)`` rows shown in the summary table."""
    options = decision.options
    return [
        ("Project name", decision.project_name),
        ("Target path", str(status.path)),
        ("Target state", _target_state_label(status)),
        ("Overwrite", _overwrite_label(decision)),
        ("TypeScript", _yes_no(options.typescript)),
        ("Tests", _yes_no(options.with_tests)),
        ("Router", _yes_no(options.router)),
    ]


def _import_rich_table() -> tuple[type[Any], Any]:
    """Import rich table and markup escaping lazily."""
    try:
        from rich.markup import escape
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table, escape


# ---------------------------------------------------------------------------
# Rich table display
# ---------------------------------------------------------------------------

def render_decision(decision: Decision, status: TargetStatus) -> None:
    """Print a Rich table summarising *decision*."""
    table_class, escape = _import_rich_table()

    table = table_class(
        title="Project setup",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Setting", style="bold", min_width=12)
    table.add_column("Value", min_width=20)

    for label, value in summary_rows(decision, status):
        table.add_row(label, escape(value))

    console.print()
    console.print(table)
    console.print()
    console.print("[bold green]Ready to scaffold.[/bold green]")
