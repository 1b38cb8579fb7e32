"""GitHub access: HTTP client and Release Fetcher."""

from .http import HttpClient, HttpError, MockHttpClient, RealHttpClient
from .releases import fetch_releases, normalize_slug, releases_url

__all__ = [
    "HttpClient",
    "HttpError",
    "MockHttpClient",
    "RealHttpClient",
    "fetch_releases",
    "normalize_slug",
    "releases_url",
]
