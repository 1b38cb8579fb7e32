from __future__ import annotations

from dataclasses import dataclass

from baseline.resolve.version import Version


@dataclass(frozen=True, slots=True)
class Release:
    """The three fields of a GitHub release that matter here."""

    tag_name: str
    draft: bool = False
    prerelease: bool = False

    @property
    def published(self) -> bool:
        return not self.draft and not self.prerelease


@dataclass(frozen=True, slots=True)
class Resolution:
    previous: Version
    current: Version
    candidates: tuple[Version, ...]
    skipped: tuple[str, ...] = ()
