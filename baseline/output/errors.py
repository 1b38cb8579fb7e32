"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from baseline.core.errors import ErrorCode
from baseline.errors import BaselineError, FetchError, FileError, NotFoundError, ParseError
from baseline.output.console import Style

if TYPE_CHECKING:
    from baseline.output.console import ConsoleProtocol

__all__ = ["print_baseline_error", "baseline_error_exit_code"]


def print_baseline_error(error: BaselineError, console: ConsoleProtocol) -> None:
    """Print a pipeline error with a hint where one helps."""
    console.error(str(error))
    match error:
        case FetchError(status=404):
            console.print("hint: check the owner/repo slug", Style.DIM)
        case FetchError(status=403):
            console.print("hint: the GitHub API rate limit may be exhausted", Style.DIM)
        case NotFoundError():
            console.print(
                "hint: only the first page of non-draft, non-prerelease releases is searched",
                Style.DIM,
            )
        case FetchError() | ParseError() | FileError():
            pass


def baseline_error_exit_code(error: BaselineError) -> int:
    """Get exit code for a pipeline error."""
    match error:
        case FetchError():
            return int(ErrorCode.NETWORK_ERROR)
        case ParseError():
            return int(ErrorCode.PARSE_ERROR)
        case NotFoundError():
            return int(ErrorCode.NOT_FOUND)
        case FileError():
            return int(ErrorCode.IO_ERROR)
