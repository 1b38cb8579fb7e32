"""Core types: results, exit codes, configuration."""

from .config import Config, ConfigError, Settings, load_settings, resolve_config
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # config
    "Config",
    "ConfigError",
    "Settings",
    "load_settings",
    "resolve_config",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
