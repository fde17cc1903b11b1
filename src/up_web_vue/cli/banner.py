"""Startup banner shown before the first question."""

from __future__ import annotations

from pathlib import Path

from up_web_vue.cli.console import console

RULE: str = "-" * 49
TAGLINE: str = "Up-web-vue cli, easier build a web project"


def tagline_style(color_capable: bool) -> str:
    return "bold green" if color_capable else "red"


def print_banner(cwd: Path) -> None:
    """Print the banner and the working directory the project lands in."""
    console.print(RULE, style="bold green", markup=False)
    console.print(TAGLINE, style=tagline_style(console.supports_rich_color()), markup=False)
    console.print(RULE, style="bold green", markup=False)
    console.print(f"current file path: {cwd}", style="blue", markup=False)
