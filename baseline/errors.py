"""Failure kinds of the baseline pipeline.

Every step returns one of these inside an ``Err``. None of them is
recoverable: the CLI reports the error and exits non-zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

__all__ = [
    "FetchError",
    "ParseError",
    "NotFoundError",
    "FileError",
    "ResolveError",
    "BaselineError",
]


@dataclass(frozen=True, slots=True)
class FetchError:
    """The release list could not be retrieved from ``url``."""

    url: str
    message: str
    status: int = 0

    def __str__(self) -> str:
        if self.status:
            return f"Failed to read releases from {self.url}: HTTP {self.status} {self.message}"
        return f"Failed to read releases from {self.url}: {self.message}"


@dataclass(frozen=True, slots=True)
class ParseError:
    """Malformed release list, or a version string that cannot be parsed."""

    message: str
    tag: str | None = None

    def __str__(self) -> str:
        if self.tag is not None:
            return f"{self.message}: {self.tag!r}"
        return self.message


@dataclass(frozen=True, slots=True)
class NotFoundError:
    """No published release is older than ``current``."""

    current: str

    def __str__(self) -> str:
        return f"Could not find a previous version for {self.current}"


@dataclass(frozen=True, slots=True)
class FileError:
    """The releases file could not be read, or the output could not be written."""

    path: Path
    message: str
    action: Literal["read", "write"] = "write"

    def __str__(self) -> str:
        return f"Cannot {self.action} {self.path}: {self.message}"


ResolveError = ParseError | NotFoundError

BaselineError = FetchError | ParseError | NotFoundError | FileError
