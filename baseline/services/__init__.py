"""Services orchestrating the baseline pipeline."""

from .baseline import (
    CACHE_IN_SECONDS,
    BaselineRequest,
    FindBaselineService,
    cache_epoch,
    cache_key,
)

__all__ = [
    "CACHE_IN_SECONDS",
    "BaselineRequest",
    "FindBaselineService",
    "cache_epoch",
    "cache_key",
]
