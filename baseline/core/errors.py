"""Exit codes for the baseline CLI.

Each failure kind of the pipeline maps to its own code so that a calling
build system can tell a network outage from a project that simply has no
earlier release.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes. Values are part of the CLI contract.

    - 0: Success
    - 1: User error (missing input, invalid config)
    - 2: Network error (release list could not be fetched)
    - 3: Parse error (malformed release list or current version)
    - 4: Not found (no release older than the current version)
    - 5: I/O error (output or releases file unreadable/unwritable)
    """

    OK = 0
    USER_ERROR = 1
    NETWORK_ERROR = 2
    PARSE_ERROR = 3
    NOT_FOUND = 4
    IO_ERROR = 5
