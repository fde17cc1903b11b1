"""Allow ``python -m up_web_vue`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m up_web_vue`` behaves identically to the ``up-web-vue``
console script.
"""

from __future__ import annotations

from up_web_vue.cli.app import cli

if __name__ == "__main__":
    cli()
