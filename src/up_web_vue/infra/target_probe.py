"""Infrastructure: target directory inspection.

Resolves the chosen project directory against the working directory and
reports whether it exists and whether it already holds files.  The
result is informational; the overwrite question is asked regardless.

Rules
-----
* Read-only: nothing is created or removed here.
* No ``print()``; callers handle user-facing output.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from up_web_vue.exceptions import TargetProbeError


@dataclass(frozen=True, slots=True)
class TargetStatus:
    """Result of probing a target directory.

    Attributes
    ----------
    path : Path
        Absolute path of the target directory.
    exists : bool
        Whether *path* exists.
    is_empty : bool
        ``True`` when *path* is missing or contains no entries.
    is_directory : bool
        ``False`` when *path* exists but is some other kind of file.
    """

    path: Path
    exists: bool
    is_empty: bool
    is_directory: bool = True


def probe_target(target_dir: str, cwd: Path | None = None) -> TargetStatus:
    """Inspect *target_dir* relative to *cwd* (defaults to the process cwd).

    Raises
    ------
    TargetProbeError
        If the directory exists but cannot be listed.
    """
    base = cwd if cwd is not None else Path.cwd()
    path = (base / target_dir).resolve()

    if not path.exists():
        return TargetStatus(path=path, exists=False, is_empty=True)

    if not path.is_dir():
        return TargetStatus(path=path, exists=True, is_empty=False, is_directory=False)

    try:
        entries = [entry.name for entry in path.iterdir()]
    except OSError as exc:
        raise TargetProbeError(f"Cannot read target directory {path}: {exc}") from exc

    return TargetStatus(
        path=path,
        exists=True,
        is_empty=not entries,
    )
