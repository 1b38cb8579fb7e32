"""Tests for baseline.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from baseline.core.config import (
    DEFAULT_OUTPUT,
    DEFAULT_TIMEOUT,
    Config,
    ConfigError,
    Settings,
    load_settings,
    resolve_config,
)
from baseline.core.result import Err, Ok


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


class TestSettings:
    def test_from_dict_reads_baseline_table(self) -> None:
        settings = Settings.from_dict(
            {
                "baseline": {
                    "github_slug": " owner/repo ",
                    "current_version": "1.0.0",
                    "output": "out.txt",
                    "timeout": 5,
                }
            }
        )
        assert settings == Settings("owner/repo", "1.0.0", "out.txt", 5.0)

    def test_from_dict_ignores_wrong_types(self) -> None:
        settings = Settings.from_dict({"baseline": {"github_slug": 3, "timeout": True}})
        assert settings == Settings()

    def test_from_env(self) -> None:
        result = Settings.from_env(
            {
                "BASELINE_GITHUB_SLUG": "owner/repo",
                "BASELINE_CURRENT_VERSION": "2.0.0-SNAPSHOT",
                "BASELINE_TIMEOUT": "12.5",
            }
        )
        assert result == Ok(Settings("owner/repo", "2.0.0-SNAPSHOT", None, 12.5))

    def test_from_env_rejects_bad_timeout(self) -> None:
        result = Settings.from_env({"BASELINE_TIMEOUT": "soon"})
        assert isinstance(result, Err)
        assert "BASELINE_TIMEOUT" in result.error.message

    def test_over_prefers_own_values(self) -> None:
        upper = Settings(github_slug="a/b", timeout=1.0)
        lower = Settings(github_slug="c/d", current_version="1.0", timeout=9.0)
        assert upper.over(lower) == Settings("a/b", "1.0", None, 1.0)


class TestLoadSettings:
    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_settings(tmp_path / "nope.toml")
        assert isinstance(result, Err)
        assert "not found" in result.error.message

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "baseline.toml", "[baseline\n")
        result = load_settings(path)
        assert isinstance(result, Err)
        assert result.error.path == path

    def test_file_without_table_is_empty(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "baseline.toml", "[other]\nkey = 1\n")
        assert load_settings(path) == Ok(Settings())


class TestResolveConfig:
    def test_defaults(self, tmp_path: Path) -> None:
        result = resolve_config(
            cli=Settings(github_slug="owner/repo", current_version="1.0.0"),
            env={},
            cwd=tmp_path,
        )
        assert result == Ok(
            Config(
                github_slug="owner/repo",
                current_version="1.0.0",
                output=tmp_path / DEFAULT_OUTPUT,
                timeout=DEFAULT_TIMEOUT,
            )
        )

    def test_precedence_cli_env_file(self, tmp_path: Path) -> None:
        _write(
            tmp_path / "baseline.toml",
            '[baseline]\ngithub_slug = "file/repo"\ncurrent_version = "1.0.0"\n'
            'output = "file.txt"\ntimeout = 3\n',
        )
        result = resolve_config(
            cli=Settings(output="/abs/cli.txt"),
            env={"BASELINE_GITHUB_SLUG": "env/repo"},
            cwd=tmp_path,
        )
        assert isinstance(result, Ok)
        config = result.value
        assert config.github_slug == "env/repo"
        assert config.current_version == "1.0.0"
        assert config.output == Path("/abs/cli.txt")
        assert config.timeout == 3.0

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "custom.toml",
            '[baseline]\ngithub_slug = "a/b"\ncurrent_version = "2.0"\n',
        )
        result = resolve_config(cli=Settings(), env={}, cwd=tmp_path, config_path=path)
        assert isinstance(result, Ok)
        assert result.value.github_slug == "a/b"

    def test_explicit_config_path_must_exist(self, tmp_path: Path) -> None:
        result = resolve_config(
            cli=Settings(github_slug="a/b", current_version="1"),
            env={},
            cwd=tmp_path,
            config_path=tmp_path / "missing.toml",
        )
        assert isinstance(result, Err)

    def test_missing_slug(self, tmp_path: Path) -> None:
        result = resolve_config(cli=Settings(current_version="1.0"), env={}, cwd=tmp_path)
        assert isinstance(result, Err)
        assert result.error == ConfigError(
            "missing GitHub repository slug",
            hint="pass --slug owner/repo or set BASELINE_GITHUB_SLUG",
        )

    def test_missing_current_version(self, tmp_path: Path) -> None:
        result = resolve_config(cli=Settings(github_slug="a/b"), env={}, cwd=tmp_path)
        assert isinstance(result, Err)
        assert "current version" in result.error.message

    @pytest.mark.parametrize("timeout", [0.0, -1.0])
    def test_rejects_non_positive_timeout(self, tmp_path: Path, timeout: float) -> None:
        result = resolve_config(
            cli=Settings(github_slug="a/b", current_version="1", timeout=timeout),
            env={},
            cwd=tmp_path,
        )
        assert isinstance(result, Err)

    def test_slug_optional_when_not_required(self, tmp_path: Path) -> None:
        result = resolve_config(
            cli=Settings(current_version="1.0.0"),
            env={},
            cwd=tmp_path,
            require_slug=False,
        )
        assert isinstance(result, Ok)
        assert result.value.github_slug is None
