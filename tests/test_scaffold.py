"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from up_web_vue import __version__
from up_web_vue.cli import exit_codes
from up_web_vue.cli.app import main
from up_web_vue.exceptions import (
    EnvironmentError,
    PromptError,
    TargetProbeError,
    UpWebVueError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [EnvironmentError, PromptError, TargetProbeError],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[UpWebVueError]
    ) -> None:
        assert issubclass(exc_class, UpWebVueError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(UpWebVueError, Exception)

    def test_hint_is_stored(self) -> None:
        err = UpWebVueError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert UpWebVueError("boom").hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_cancelled_is_non_zero(self) -> None:
        assert exit_codes.CANCELLED == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# Bootstrap flags
# ---------------------------------------------------------------------------

class TestBootstrap:
    def test_help_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        assert "--vue-router" in out
        assert "--force" in out

    def test_version_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_version_prefix_not_abbreviated(self) -> None:
        # --ver must reach the flag parser, not trigger --version.
        from up_web_vue.cli.app import _build_parser

        _, remaining = _build_parser().parse_known_args(["--ver", "my-app"])
        assert remaining == ["--ver", "my-app"]
