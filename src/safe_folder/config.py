"""Configuration loading for safe-folder.

Settings are merged from, lowest precedence first: built-in defaults, an
optional ``safe-folder.yaml`` in the working directory, and environment
variables.
"""

from __future__ import annotations

import codecs
import logging
import os
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from safe_folder.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "safe-folder.yaml"
DEFAULT_LOG_FILE = Path("logfile.txt")

# Environment variable -> settings field
ENV_OVERRIDES = {
    "SAFE_FOLDER_LOG_FILE": "log_file",
    "SAFE_FOLDER_LOG_LEVEL": "log_level",
}


class Settings(BaseModel):
    """Effective configuration."""

    model_config = ConfigDict(extra="forbid")

    log_file: Path = DEFAULT_LOG_FILE
    encoding: str = "utf-8"
    log_level: str = "WARNING"

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {value}") from e
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value}")
        return level


def _read_config_file(path: Path) -> dict:
    """Parse the YAML config file into a mapping."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Could not read {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping")
    return data


def load_settings(
    cwd: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Load settings for the given working directory.

    Args:
        cwd: Directory holding the optional config file; relative log paths
            resolve against it. Defaults to the process working directory.
        environ: Environment mapping. Defaults to ``os.environ``.

    Returns:
        Validated Settings with an absolute ``log_file``.

    Raises:
        ConfigError: If the config file or an override is invalid.
    """
    cwd = cwd or Path.cwd()
    environ = os.environ if environ is None else environ

    data: dict = {}
    config_file = cwd / CONFIG_FILENAME
    if config_file.exists():
        logger.debug("Loading configuration from %s", config_file)
        data.update(_read_config_file(config_file))

    for var, field in ENV_OVERRIDES.items():
        if var in environ:
            data[field] = environ[var]

    try:
        settings = Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

    if not settings.log_file.is_absolute():
        settings = settings.model_copy(update={"log_file": cwd / settings.log_file})
    return settings
