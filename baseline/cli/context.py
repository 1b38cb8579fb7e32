from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from baseline.cli.commands._helpers import exit_on_error
from baseline.core.config import Config, Settings, resolve_config
from baseline.core.errors import ErrorCode
from baseline.github.http import HttpClient, RealHttpClient
from baseline.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    console: ConsoleProtocol
    http: HttpClient


def build_context(
    *,
    cli: Settings,
    config_path: Path | None = None,
    quiet: bool = False,
    require_slug: bool = True,
) -> CLIContext:
    console = RichConsole(quiet=quiet)
    config_result = resolve_config(
        cli=cli,
        env=os.environ,
        cwd=Path.cwd(),
        config_path=config_path,
        require_slug=require_slug,
    )
    exit_on_error(config_result, console, ErrorCode.USER_ERROR)
    config = config_result.unwrap()

    return CLIContext(
        config=config,
        console=console,
        http=RealHttpClient(timeout=config.timeout),
    )
