"""Tests for target directory probing (infra/target_probe.py).

All tests work inside ``tmp_path``, with no dependency on the real cwd.
"""

from __future__ import annotations

import dataclasses
from pathlib import Path
from unittest.mock import patch

import pytest

from up_web_vue.exceptions import TargetProbeError
from up_web_vue.infra.target_probe import TargetStatus, probe_target


class TestProbeTarget:
    def test_missing_directory(self, tmp_path: Path) -> None:
        status = probe_target("new-app", tmp_path)
        assert status == TargetStatus(path=tmp_path.resolve() / "new-app", exists=False, is_empty=True)

    def test_empty_directory(self, tmp_path: Path) -> None:
        (tmp_path / "app").mkdir()
        status = probe_target("app", tmp_path)
        assert status.exists is True
        assert status.is_empty is True

    def test_non_empty_directory(self, tmp_path: Path) -> None:
        (tmp_path / "app").mkdir()
        (tmp_path / "app" / "index.html").write_text("<html></html>")
        assert probe_target("app", tmp_path).is_empty is False

    def test_current_directory(self, tmp_path: Path) -> None:
        (tmp_path / "readme.md").write_text("hi")
        status = probe_target(".", tmp_path)
        assert status.path == tmp_path.resolve()
        assert status.is_empty is False

    def test_defaults_to_process_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.chdir(tmp_path)
        assert probe_target("x").path == tmp_path.resolve() / "x"

    def test_regular_file_reported(self, tmp_path: Path) -> None:
        (tmp_path / "app").write_text("not a dir")
        status = probe_target("app", tmp_path)
        assert status.exists is True
        assert status.is_directory is False
        assert status.is_empty is False

    def test_directory_flagged_as_directory(self, tmp_path: Path) -> None:
        (tmp_path / "app").mkdir()
        assert probe_target("app", tmp_path).is_directory is True

    def test_unreadable_raises(self, tmp_path: Path) -> None:
        (tmp_path / "app").mkdir()
        with patch.object(Path, "iterdir", side_effect=PermissionError("denied")):
            with pytest.raises(TargetProbeError, match="Cannot read"):
                probe_target("app", tmp_path)

    def test_status_frozen(self, tmp_path: Path) -> None:
        status = probe_target("x", tmp_path)
        with pytest.raises(dataclasses.FrozenInstanceError):
            status.exists = True  # type: ignore[misc]
