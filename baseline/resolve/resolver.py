"""Pick the latest published release older than the version being built.

Filtering happens in this order:
1. drafts and prereleases (by their GitHub flags) are dropped
2. one leading ``v`` is stripped from each tag
3. tags containing ``-`` (qualified versions such as ``2.0.0-rc1``) are dropped
4. remaining tags that do not parse as versions are skipped and reported

The previous version is the greatest remaining version that is strictly
less than the current version with its ``-qualifier`` removed.
"""

from __future__ import annotations

import json

from baseline.core.result import Err, Ok, Result
from baseline.core.structured import as_obj_list, as_str_dict, get_flag
from baseline.errors import NotFoundError, ParseError, ResolveError
from baseline.resolve.model import Release, Resolution
from baseline.resolve.version import Version, parse_version

__all__ = [
    "parse_releases",
    "candidate_versions",
    "trim_version",
    "resolve_previous",
]


def parse_releases(data: bytes | str) -> Result[list[Release], ParseError]:
    """Decode a GitHub release list into Release records.

    Only ``tag_name``, ``draft`` and ``prerelease`` are read. The flags are
    true only for a JSON ``true``. Drafts and prereleases without a usable
    ``tag_name`` are dropped; a published release without one is an error.
    """
    try:
        text = data.decode("utf-8") if isinstance(data, bytes) else data
        raw: object = json.loads(text)
    except (ValueError, RecursionError) as e:
        # ValueError covers JSONDecodeError, UnicodeDecodeError and oversized integers
        return Err(ParseError(f"Release list is not valid JSON: {e}"))

    items = as_obj_list(raw)
    if items is None:
        return Err(ParseError("Release list must be a JSON array"))

    releases: list[Release] = []
    for index, item in enumerate(items):
        record = as_str_dict(item)
        if record is None:
            return Err(ParseError(f"Release #{index} is not a JSON object"))
        draft = get_flag(record, "draft")
        prerelease = get_flag(record, "prerelease")
        tag_name = record.get("tag_name")
        if not isinstance(tag_name, str):
            if draft or prerelease:
                continue
            return Err(ParseError(f"Release #{index} has no string tag_name"))
        releases.append(Release(tag_name=tag_name, draft=draft, prerelease=prerelease))
    return Ok(releases)


def candidate_versions(releases: list[Release]) -> tuple[list[Version], list[str]]:
    """Return (sorted published versions, tags skipped as unparseable)."""
    versions: list[Version] = []
    skipped: list[str] = []
    for release in releases:
        if not release.published:
            continue
        tag = release.tag_name
        name = tag[1:] if tag.startswith("v") else tag
        if "-" in name:
            continue
        version = parse_version(name)
        if version is None:
            skipped.append(tag)
            continue
        versions.append(version)
    versions.sort()
    return versions, skipped


def trim_version(version: str) -> str:
    """Drop everything from the first ``-`` on (``3.0.0-SNAPSHOT`` -> ``3.0.0``)."""
    head, _, _ = version.partition("-")
    return head


def resolve_previous(
    release_list: bytes | str,
    current_version: str,
) -> Result[Resolution, ResolveError]:
    """Find the greatest published version strictly below ``current_version``.

    Args:
        release_list: Body of ``GET /repos/{owner}/{repo}/releases``
        current_version: Version being built, ``-qualifier`` allowed

    Returns:
        Ok with the Resolution, Err(ParseError) for malformed input, or
        Err(NotFoundError) when no release is older than the current version
    """
    parsed = parse_releases(release_list)
    if isinstance(parsed, Err):
        return parsed

    versions, skipped = candidate_versions(parsed.value)

    trimmed = trim_version(current_version.strip())
    current = parse_version(trimmed)
    if current is None:
        return Err(ParseError("Current version is not a valid version", tag=current_version))

    previous: Version | None = None
    for version in versions:
        if version < current:
            previous = version
    if previous is None:
        return Err(NotFoundError(current=str(current)))

    return Ok(
        Resolution(
            previous=previous,
            current=current,
            candidates=tuple(versions),
            skipped=tuple(skipped),
        )
    )
