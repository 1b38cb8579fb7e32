"""Release Fetcher: one GET of a repository's GitHub release list.

Only the first page returned by the API is read. There is no
authentication, retry or caching here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from baseline.core.result import Err, Ok, Result
from baseline.errors import FetchError

if TYPE_CHECKING:
    from baseline.github.http import HttpClient

__all__ = [
    "GITHUB_API",
    "ACCEPT_HEADER",
    "normalize_slug",
    "releases_url",
    "fetch_releases",
]

GITHUB_API = "https://api.github.com"
ACCEPT_HEADER = "application/vnd.github.v3+json"


def normalize_slug(slug: str) -> str:
    """Strip one leading and one trailing slash: ``/owner/repo/`` -> ``owner/repo``."""
    slug = slug.strip()
    if slug.startswith("/"):
        slug = slug[1:]
    if slug.endswith("/"):
        slug = slug[:-1]
    return slug


def releases_url(slug: str) -> str:
    return f"{GITHUB_API}/repos/{normalize_slug(slug)}/releases"


def _is_owner_repo(slug: str) -> bool:
    owner, sep, name = slug.partition("/")
    return bool(sep and owner and name) and "/" not in name


def fetch_releases(http: HttpClient, slug: str) -> Result[bytes, FetchError]:
    """Fetch the raw release list JSON for ``slug``.

    Args:
        http: HTTP client to use
        slug: Repository in "owner/repo" form, surrounding slashes allowed

    Returns:
        Ok with the response body, or Err(FetchError) carrying the URL
    """
    url = releases_url(slug)
    if not _is_owner_repo(normalize_slug(slug)):
        return Err(FetchError(url=url, message=f"not an owner/repo slug: {slug!r}"))

    result = http.get_bytes(url, headers={"Accept": ACCEPT_HEADER})
    if isinstance(result, Err):
        error = result.error
        return Err(FetchError(url=url, message=error.message, status=error.status))
    return Ok(result.value)
