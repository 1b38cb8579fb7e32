"""Typed configuration loading and merging.

Inputs are resolved once, at invocation time, from four layers with this
precedence: command line > environment > ``baseline.toml`` > defaults.

Example ``baseline.toml``::

    [baseline]
    github_slug = "micronaut-projects/micronaut-core"
    current_version = "4.3.0-SNAPSHOT"
    output = "build/baseline.txt"
    timeout = 15
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_float, get_str, get_table

__all__ = [
    "Config",
    "ConfigError",
    "Settings",
    "load_settings",
    "resolve_config",
    "CONFIG_FILE_NAME",
    "DEFAULT_OUTPUT",
    "DEFAULT_TIMEOUT",
    "ENV_GITHUB_SLUG",
    "ENV_CURRENT_VERSION",
    "ENV_OUTPUT",
    "ENV_TIMEOUT",
]

CONFIG_FILE_NAME = "baseline.toml"
DEFAULT_OUTPUT = "build/baseline.txt"
DEFAULT_TIMEOUT = 30.0

ENV_GITHUB_SLUG = "BASELINE_GITHUB_SLUG"
ENV_CURRENT_VERSION = "BASELINE_CURRENT_VERSION"
ENV_OUTPUT = "BASELINE_OUTPUT"
ENV_TIMEOUT = "BASELINE_TIMEOUT"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when configuration cannot be loaded or is incomplete."""

    message: str
    path: Path | None = None
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class Settings:
    """One layer of partially specified settings."""

    github_slug: str | None = None
    current_version: str | None = None
    output: str | None = None
    timeout: float | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Settings:
        """Create Settings from parsed TOML (the ``[baseline]`` table)."""
        table: StrDict = get_table(data, "baseline") or {}
        return cls(
            github_slug=get_str(table, "github_slug"),
            current_version=get_str(table, "current_version"),
            output=get_str(table, "output"),
            timeout=get_float(table, "timeout"),
        )

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> Result[Settings, ConfigError]:
        timeout: float | None = None
        raw_timeout = env.get(ENV_TIMEOUT, "").strip()
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                return Err(ConfigError(f"{ENV_TIMEOUT} is not a number: {raw_timeout!r}"))

        return Ok(
            cls(
                github_slug=get_str(env, ENV_GITHUB_SLUG),
                current_version=get_str(env, ENV_CURRENT_VERSION),
                output=get_str(env, ENV_OUTPUT),
                timeout=timeout,
            )
        )

    def over(self, lower: Settings) -> Settings:
        """Return these settings with unset fields taken from ``lower``."""
        return Settings(
            github_slug=self.github_slug if self.github_slug is not None else lower.github_slug,
            current_version=(
                self.current_version if self.current_version is not None else lower.current_version
            ),
            output=self.output if self.output is not None else lower.output,
            timeout=self.timeout if self.timeout is not None else lower.timeout,
        )


@dataclass(frozen=True, slots=True)
class Config:
    """Fully resolved inputs for one invocation."""

    github_slug: str | None
    current_version: str
    output: Path
    timeout: float = DEFAULT_TIMEOUT


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and syntax errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_settings(path: Path) -> Result[Settings, ConfigError]:
    """Load the ``[baseline]`` table of a TOML file.

    Args:
        path: Path to the TOML file

    Returns:
        Ok(Settings) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result
    return Ok(Settings.from_dict(result.value))


def resolve_config(
    *,
    cli: Settings,
    env: Mapping[str, str],
    cwd: Path,
    config_path: Path | None = None,
    require_slug: bool = True,
) -> Result[Config, ConfigError]:
    """Merge all configuration layers into a complete Config.

    An explicit ``config_path`` must exist; the implicit ``baseline.toml``
    in ``cwd`` is optional. Relative output paths are resolved against
    ``cwd``. ``require_slug=False`` is for runs that read a saved release
    list instead of calling GitHub.
    """
    file_settings = Settings()
    if config_path is not None:
        loaded = load_settings(config_path)
        if isinstance(loaded, Err):
            return loaded
        file_settings = loaded.value
    elif (cwd / CONFIG_FILE_NAME).is_file():
        loaded = load_settings(cwd / CONFIG_FILE_NAME)
        if isinstance(loaded, Err):
            return loaded
        file_settings = loaded.value

    env_result = Settings.from_env(env)
    if isinstance(env_result, Err):
        return env_result

    merged = cli.over(env_result.value.over(file_settings))

    if require_slug and not merged.github_slug:
        return Err(
            ConfigError(
                "missing GitHub repository slug",
                hint=f"pass --slug owner/repo or set {ENV_GITHUB_SLUG}",
            )
        )
    if not merged.current_version:
        return Err(
            ConfigError(
                "missing current version",
                hint=f"pass --current-version or set {ENV_CURRENT_VERSION}",
            )
        )

    timeout = merged.timeout if merged.timeout is not None else DEFAULT_TIMEOUT
    if timeout <= 0:
        return Err(ConfigError(f"timeout must be positive, got {timeout}"))

    output = Path(merged.output or DEFAULT_OUTPUT).expanduser()
    if not output.is_absolute():
        output = cwd / output

    return Ok(
        Config(
            github_slug=merged.github_slug,
            current_version=merged.current_version,
            output=output,
            timeout=timeout,
        )
    )
