"""Tests for decision summary rendering (cli/summary.py)."""

from __future__ import annotations

from pathlib import Path

import pytest

from up_web_vue.cli.summary import (
    _overwrite_label,
    _target_state_label,
    render_decision,
    summary_rows,
)
from up_web_vue.core.arguments import parse_arguments
from up_web_vue.core.models import Decision
from up_web_vue.infra.target_probe import TargetStatus


def _decision(argv: list[str], should_overwrite: bool | None) -> Decision:
    options = parse_arguments(argv)
    return Decision(
        project_name=options.project_name or "up-web-vue",
        should_overwrite=should_overwrite,
        force=options.force,
        options=options,
    )


def _status(
    exists: bool = True, is_empty: bool = False, is_directory: bool = True,
) -> TargetStatus:
    return TargetStatus(
        path=Path("/tmp/my-app"), exists=exists, is_empty=is_empty, is_directory=is_directory,
    )


class TestLabels:
    def test_overwrite_yes(self) -> None:
        assert _overwrite_label(_decision(["a"], True)) == "yes"

    def test_overwrite_skipped_by_force(self) -> None:
        assert _overwrite_label(_decision(["a", "--force"], None)) == "skipped (--force)"

    @pytest.mark.parametrize(
        ("exists", "is_empty", "expected"),
        [
            (False, True, "will be created"),
            (True, True, "empty"),
            (True, False, "not empty"),
        ],
    )
    def test_target_state(self, exists: bool, is_empty: bool, expected: str) -> None:
        assert _target_state_label(_status(exists, is_empty)) == expected

    def test_target_state_not_a_directory(self) -> None:
        status = _status(exists=True, is_empty=False, is_directory=False)
        assert _target_state_label(status) == "not a directory"


class TestSummaryRows:
    def test_rows(self) -> None:
        rows = dict(summary_rows(_decision(["my-app", "--ts", "--vue-router"], True), _status()))
        assert rows["Project name"] == "my-app"
        assert rows["Overwrite"] == "yes"
        assert rows["TypeScript"] == "yes"
        assert rows["Tests"] == "no"
        assert rows["Router"] == "yes"
        assert rows["Target state"] == "not empty"


class TestRenderDecision:
    def test_prints_ready_line(self, capsys: pytest.CaptureFixture[str]) -> None:
        render_decision(_decision(["[odd]"], True), _status())
        err = capsys.readouterr().err
        assert "Project setup" in err
        assert "[odd]" in err
        assert "Ready to scaffold." in err
