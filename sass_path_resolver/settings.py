"""Settings for the sass-path-resolver CLI.

Sources, lowest to highest precedence:
1. Defaults
2. YAML config file (--config, or .sass-path-resolver.yaml in the working directory)
3. Environment variables (SASS_PATH_RESOLVER_*)
"""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = ".sass-path-resolver.yaml"

ENV_INCLUDE_PATHS = "SASS_PATH_RESOLVER_INCLUDE_PATHS"
ENV_LOG_LEVEL = "SASS_PATH_RESOLVER_LOG_LEVEL"
ENV_LOG_FILE = "SASS_PATH_RESOLVER_LOG_FILE"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ResolverSettings(BaseModel):
    """Resolved CLI settings."""

    include_paths: list[str] = Field(default_factory=list, description="Include paths, searched in order")
    log_level: str = Field("WARNING", description="Log level for the sass_path_resolver logger")
    log_file: str | None = Field(None, description="Optional JSONL log file")

    @field_validator("include_paths", mode="before")
    @classmethod
    def _single_path(cls, value: Any) -> Any:
        # A single include path may be given as a plain string.
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}, expected one of {', '.join(LOG_LEVELS)}")
        return level


def _read_config_file(config_file: Path) -> dict[str, Any]:
    try:
        with open(config_file, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_file}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"{config_file} must contain a mapping, got {type(data).__name__}")
    return data


def _read_env(env: Mapping[str, str]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    if raw_paths := env.get(ENV_INCLUDE_PATHS):
        values["include_paths"] = [p for p in raw_paths.split(os.pathsep) if p]
    if level := env.get(ENV_LOG_LEVEL):
        values["log_level"] = level
    if log_file := env.get(ENV_LOG_FILE):
        values["log_file"] = log_file
    return values


def load_settings(
    config_file: Path | None = None,
    *,
    env: Mapping[str, str] | None = None,
    cwd: Path | None = None,
) -> ResolverSettings:
    """Load settings from config file and environment.

    Args:
        config_file: Explicit YAML config file (must exist)
        env: Environment mapping (default: os.environ)
        cwd: Directory searched for the default config file (default: current directory)

    Returns:
        Merged settings

    Raises:
        ConfigurationError: Missing explicit config file, invalid YAML or invalid values
    """
    env = os.environ if env is None else env
    values: dict[str, Any] = {}

    if config_file is not None:
        if not config_file.is_file():
            raise ConfigurationError(f"Config file not found: {config_file}")
        values.update(_read_config_file(config_file))
    else:
        default_file = (cwd or Path.cwd()) / DEFAULT_CONFIG_FILENAME
        if default_file.is_file():
            logger.debug(f"Using config file {default_file}")
            values.update(_read_config_file(default_file))

    values.update(_read_env(env))

    try:
        return ResolverSettings.model_validate(values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings: {e}") from e
