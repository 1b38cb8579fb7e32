"""HTTP client abstraction for the GitHub API.

This module provides:
- HttpClient: Protocol for HTTP operations (injectable for tests)
- RealHttpClient: Real implementation using urllib
- MockHttpClient: Mock implementation for testing
"""

from __future__ import annotations

import http.client
import ssl
import urllib.error
import urllib.request
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from baseline import __version__
from baseline.core.result import Err, Ok, Result

__all__ = [
    "HttpClient",
    "RealHttpClient",
    "MockHttpClient",
    "HttpError",
]


@dataclass(frozen=True, slots=True)
class HttpError:
    """HTTP error details.

    Attributes:
        url: The URL that failed
        status: HTTP status code (0 for network errors)
        message: Human-readable error message
    """

    url: str
    status: int
    message: str

    def __str__(self) -> str:
        if self.status:
            return f"HTTP {self.status}: {self.message} ({self.url})"
        return f"{self.message} ({self.url})"


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP operations.

    Lets tests inject a mock client instead of reaching api.github.com.
    """

    def get_bytes(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
    ) -> Result[bytes, HttpError]:
        """GET ``url`` and return the whole response body.

        Args:
            url: URL to fetch
            headers: Extra request headers

        Returns:
            Ok with the body bytes, or Err with HttpError
        """
        ...


class RealHttpClient:
    """Real HTTP client using urllib.

    Handles:
    - HTTPS with system certificates
    - Timeout handling
    - Mapping every transport failure to HttpError
    """

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: str = f"baseline/{__version__}",
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self._ssl_context = ssl.create_default_context()

    def get_bytes(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
    ) -> Result[bytes, HttpError]:
        request_headers = {"User-Agent": self.user_agent}
        if headers:
            request_headers.update(headers)
        try:
            req = urllib.request.Request(url, headers=request_headers, method="GET")
            with urllib.request.urlopen(
                req,
                timeout=self.timeout,
                context=self._ssl_context,
            ) as response:
                return Ok(response.read())
        except urllib.error.HTTPError as e:
            return Err(HttpError(url=url, status=e.code, message=str(e.reason)))
        except urllib.error.URLError as e:
            return Err(HttpError(url=url, status=0, message=str(e.reason)))
        except http.client.HTTPException as e:
            return Err(HttpError(url=url, status=0, message=f"{type(e).__name__}: {e}"))
        except TimeoutError:
            return Err(HttpError(url=url, status=0, message="Request timed out"))
        except ValueError as e:
            return Err(HttpError(url=url, status=0, message=str(e)))
        except OSError as e:
            return Err(HttpError(url=url, status=0, message=str(e)))


class MockHttpClient:
    """Mock HTTP client for testing.

    Usage:
        client = MockHttpClient()
        client.set_bytes("https://api.github.com/repos/o/r/releases", b"[]")
        result = client.get_bytes("https://api.github.com/repos/o/r/releases")
        assert result == Ok(b"[]")
    """

    def __init__(self) -> None:
        self._responses: dict[str, bytes | HttpError] = {}
        self.calls: list[tuple[str, dict[str, str]]] = []

    def set_bytes(self, url: str, response: bytes | HttpError) -> None:
        """Set the response body (or error) for URL."""
        self._responses[url] = response

    def get_bytes(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
    ) -> Result[bytes, HttpError]:
        self.calls.append((url, dict(headers or {})))

        if url not in self._responses:
            return Err(HttpError(url=url, status=404, message="Not found (mock)"))

        response = self._responses[url]
        if isinstance(response, HttpError):
            return Err(response)
        return Ok(response)
