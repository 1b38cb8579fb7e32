"""Release version model and ordering.

A version is a dot-separated list of components. All-digit components are
numeric and compare as integers; anything else compares as text and sorts
after any number in the same position. Trailing zero components do not
count, so ``1.2``, ``1.2.0`` and ``01.2.0`` are the same version.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TypeAlias

__all__ = ["Version", "parse_version"]


_TOKEN_RE = re.compile(r"[0-9A-Za-z_]+(?:\.[0-9A-Za-z_]+)*")

# (kind, number, text): kind 0 is numeric, kind 1 is textual
_Component: TypeAlias = tuple[int, int, str]


@dataclass(frozen=True, slots=True, order=True)
class Version:
    key: tuple[_Component, ...] = field(repr=False)
    text: str = field(compare=False)

    def __str__(self) -> str:
        return self.text


def parse_version(text: str) -> Version | None:
    """Parse ``text`` into a Version, or None if it is not a version token."""
    if not text.isascii() or _TOKEN_RE.fullmatch(text) is None:
        return None
    key: list[_Component] = []
    for part in text.split("."):
        if not part.isdigit():
            key.append((1, 0, part))
            continue
        try:
            key.append((0, int(part), ""))
        except ValueError:
            # beyond the interpreter's int string conversion limit
            return None
    while key and key[-1] == (0, 0, ""):
        key.pop()
    return Version(key=tuple(key), text=text)
