"""Find command - resolve and write the previous released version."""

from __future__ import annotations

from pathlib import Path

import typer

from baseline.cli.commands._helpers import exit_with_code
from baseline.cli.context import build_context
from baseline.core.config import Settings
from baseline.core.result import Err
from baseline.output.errors import baseline_error_exit_code, print_baseline_error
from baseline.services.baseline import BaselineRequest, FindBaselineService


def find(
    slug: str | None = typer.Option(
        None, "--slug", "-s", help="GitHub repository, owner/repo"
    ),
    current_version: str | None = typer.Option(
        None, "--current-version", "-c", help="Version being built (e.g. 4.3.0-SNAPSHOT)"
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="File receiving the previous version"
    ),
    releases_file: Path | None = typer.Option(
        None,
        "--releases-file",
        help="Resolve from a saved release list JSON instead of calling GitHub",
    ),
    timeout: float | None = typer.Option(None, "--timeout", help="HTTP timeout in seconds"),
    config_path: Path | None = typer.Option(
        None, "--config", help="Config file (default: ./baseline.toml if present)"
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print the result"),
) -> None:
    """Find the latest release older than the current version."""
    ctx = build_context(
        cli=Settings(
            github_slug=slug,
            current_version=current_version,
            output=str(output) if output is not None else None,
            timeout=timeout,
        ),
        config_path=config_path,
        quiet=quiet,
        require_slug=releases_file is None,
    )
    config = ctx.config

    service = FindBaselineService(http=ctx.http, console=ctx.console)
    result = service.run(
        BaselineRequest(
            github_slug=config.github_slug,
            current_version=config.current_version,
            output=config.output,
            releases_file=releases_file,
        )
    )
    if isinstance(result, Err):
        print_baseline_error(result.error, ctx.console)
        exit_with_code(baseline_error_exit_code(result.error))

    previous = result.value.previous
    if quiet:
        typer.echo(str(previous))
    else:
        ctx.console.success(f"previous version: {previous} -> {config.output}")
