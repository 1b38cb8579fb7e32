from __future__ import annotations

import os
import time

import typer

from baseline.cli.commands._helpers import exit_with_code
from baseline.core.config import ENV_GITHUB_SLUG
from baseline.core.errors import ErrorCode
from baseline.services.baseline import cache_key as make_cache_key


def cache_key(
    slug: str | None = typer.Option(None, "--slug", "-s", help="GitHub repository, owner/repo"),
    now: float | None = typer.Option(
        None, "--now", help="Unix timestamp to bucket (default: current time)"
    ),
) -> None:
    """Print an hourly cache key for build caches."""
    slug = slug or os.environ.get(ENV_GITHUB_SLUG, "").strip()
    if not slug:
        typer.echo(f"error: pass --slug or set {ENV_GITHUB_SLUG}", err=True)
        exit_with_code(int(ErrorCode.USER_ERROR))

    typer.echo(make_cache_key(slug, time.time() if now is None else now))
