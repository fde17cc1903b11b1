"""Infrastructure layer — operating system integration.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Raw ``OSError`` is re-raised as an
  :class:`~up_web_vue.exceptions.UpWebVueError` subclass.
"""

from up_web_vue.infra.target_probe import TargetStatus, probe_target

__all__: list[str] = [
    "TargetStatus",
    "probe_target",
]
