from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from baseline.core.result import Err, Ok, Result
from baseline.errors import BaselineError, FileError
from baseline.github.http import HttpClient
from baseline.github.releases import fetch_releases, normalize_slug, releases_url
from baseline.output.console import ConsoleProtocol
from baseline.resolve.model import Resolution
from baseline.resolve.resolver import resolve_previous

__all__ = [
    "CACHE_IN_SECONDS",
    "BaselineRequest",
    "FindBaselineService",
    "cache_epoch",
    "cache_key",
]

CACHE_IN_SECONDS = 3600


def cache_epoch(now_seconds: float) -> int:
    """Bucket a Unix timestamp to the start of its hour.

    Calls within the same hour share the epoch, so an incremental build
    cache keyed on it treats them as identical inputs.
    """
    return int(now_seconds) // CACHE_IN_SECONDS * CACHE_IN_SECONDS


def cache_key(slug: str, now_seconds: float) -> str:
    return f"{normalize_slug(slug)}@{cache_epoch(now_seconds)}"


@dataclass(frozen=True, slots=True)
class BaselineRequest:
    github_slug: str | None
    current_version: str
    output: Path
    releases_file: Path | None = None


class FindBaselineService:
    """Fetch the release list, resolve the previous version, write it out."""

    def __init__(self, *, http: HttpClient, console: ConsoleProtocol) -> None:
        self._http = http
        self._console = console

    def run(self, request: BaselineRequest) -> Result[Resolution, BaselineError]:
        body = self._release_list(request)
        if isinstance(body, Err):
            return body

        resolved = resolve_previous(body.value, request.current_version)
        if isinstance(resolved, Err):
            return resolved
        resolution = resolved.value

        for tag in resolution.skipped:
            self._console.warning(f"skipping release tag that is not a version: {tag}")
        self._console.info(
            f"{len(resolution.candidates)} published versions, current {resolution.current}"
        )

        written = self._write(request.output, str(resolution.previous))
        if isinstance(written, Err):
            return written
        return Ok(resolution)

    def _release_list(self, request: BaselineRequest) -> Result[bytes, BaselineError]:
        if request.releases_file is not None:
            self._console.info(f"reading releases from {request.releases_file}")
            try:
                return Ok(request.releases_file.read_bytes())
            except OSError as e:
                return Err(
                    FileError(
                        path=request.releases_file,
                        message=e.strerror or str(e),
                        action="read",
                    )
                )

        slug = request.github_slug or ""
        self._console.info(f"fetching {releases_url(slug)}")
        return fetch_releases(self._http, slug)

    def _write(self, path: Path, version: str) -> Result[Path, FileError]:
        """Write ``version`` as the whole content of ``path``, no newline.

        The text goes to a sibling temp file that replaces ``path`` only once
        complete, so a failed run leaves any earlier baseline file intact.
        """
        tmp_path: Path | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{path.name}.",
                suffix=".tmp",
                dir=str(path.parent),
            )
            tmp_path = Path(tmp_name)
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
                handle.write(version)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_path, path)
        except OSError as e:
            return Err(FileError(path=path, message=e.strerror or str(e)))
        finally:
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink(missing_ok=True)
        return Ok(path)
