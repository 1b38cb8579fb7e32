"""Version Resolver: release list + current version -> previous version."""

from .model import Release, Resolution
from .resolver import candidate_versions, parse_releases, resolve_previous, trim_version
from .version import Version, parse_version

__all__ = [
    "Release",
    "Resolution",
    "Version",
    "candidate_versions",
    "parse_releases",
    "parse_version",
    "resolve_previous",
    "trim_version",
]
