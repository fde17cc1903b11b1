"""CLI console helpers with optional Rich support.

Rich is imported lazily so bootstrap paths (``--help``, ``--version``)
and the error boundary keep working when it is not installed.  All
output goes to stderr.
"""

from __future__ import annotations

import sys
from typing import Any

from up_web_vue.exceptions import EnvironmentError

_RICH_COLOR_SYSTEMS: tuple[str, ...] = ("truecolor",)


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


class _ConsoleProxy:
	"""``print``-compatible proxy with plain-stderr fallback."""

	def print(self, *objects: object, style: str | None = None, markup: bool = True) -> None:
		"""Render with Rich when available, else plain stderr print.

		*style* and *markup* are forwarded to Rich and ignored by the
		fallback.
		"""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects, style=style, markup=markup)

	def supports_rich_color(self) -> bool:
		"""True when stderr is a terminal rendering more than 8-bit color."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			return False
		return bool(rich_console.is_terminal) and rich_console.color_system in _RICH_COLOR_SYSTEMS


console = _ConsoleProxy()
