"""Minimist-style argument parser.

Turns raw command-line tokens into a :class:`ParsedArguments`.  Every
flag is a boolean and every positional is a string, so parsing never
fails: unknown flags are accepted as-is and missing flags read as
``False``.

Token rules
-----------
* ``--name``          -> ``name = True``
* ``--name=value``    -> ``name = value != "false"``
* ``--no-name``       -> ``name = False``
* ``-abc``            -> ``a = b = c = True``
* ``-`` and anything after ``--`` are positionals.

Flags never consume the following token.  When several aliases of one
group are given, the group is ``True`` if any of them is truthy.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field

from up_web_vue.core.models import ParsedArguments

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ArgumentConfig:
    """Fixed parser configuration."""

    aliases: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    """Canonical name -> synonyms that resolve to it."""

    booleans: tuple[str, ...] = ()
    """Declared flags reported as ``False`` when absent."""

    def alias_index(self) -> dict[str, str]:
        """Return a flat alias -> canonical lookup."""
        return {
            alias: canonical
            for canonical, synonyms in self.aliases.items()
            for alias in synonyms
        }

    def canonical_names(self) -> tuple[str, ...]:
        names = list(self.booleans)
        names.extend(name for name in self.aliases if name not in names)
        return tuple(names)


CLI_ARGUMENT_CONFIG = ArgumentConfig(
    aliases={
        "typescript": ("ts", "TS"),
        "with-tests": ("tests",),
        "router": ("vue-router",),
        "verbose": ("v",),
    },
    booleans=("force",),
)


def _split_flag(token: str) -> list[tuple[str, bool]]:
    """Return the ``(name, value)`` pairs a single flag token sets."""
    if token.startswith("--"):
        body = token[2:]
        if "=" in body:
            name, _, raw = body.partition("=")
            return [(name, raw != "false")]
        if body.startswith("no-") and len(body) > 3:
            return [(body[3:], False)]
        return [(body, True)]

    body = token[1:]
    if "=" in body:
        letters, _, raw = body.partition("=")
        pairs = [(letter, True) for letter in letters[:-1]]
        pairs.append((letters[-1:], raw != "false"))
        return [(name, value) for name, value in pairs if name]
    return [(letter, True) for letter in body]


def _is_flag(token: str) -> bool:
    return token.startswith("-") and token not in ("-", "--")


def parse_arguments(
    tokens: Sequence[str],
    config: ArgumentConfig = CLI_ARGUMENT_CONFIG,
) -> ParsedArguments:
    """Parse *tokens* (argv without program/script paths) into options."""
    alias_index = config.alias_index()
    positionals: list[str] = []
    seen: dict[str, list[bool]] = {}

    remaining: Iterator[str] = iter(tokens)
    for token in remaining:
        if token == "--":
            positionals.extend(remaining)
            break
        if not _is_flag(token):
            positionals.append(str(token))
            continue
        for name, value in _split_flag(token):
            canonical = alias_index.get(name, name)
            seen.setdefault(canonical, []).append(value)

    flags: dict[str, bool] = {name: False for name in config.canonical_names()}
    for canonical, values in seen.items():
        flags[canonical] = any(values)

    parsed = ParsedArguments(
        positionals=tuple(positionals),
        flags=flags,
        aliases=alias_index,
    )
    logger.debug("argv: positionals=%s flags=%s", parsed.positionals, flags)
    return parsed
