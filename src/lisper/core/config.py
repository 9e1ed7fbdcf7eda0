"""
Configuration for Lisper hosts.

Configuration is loaded from the ``[lisper]`` table of ``lisper.toml``:

    [lisper]
    aliases = true          # bind add/sub/mul/div/mod
    log_level = "WARNING"
"""

from __future__ import annotations

import tomllib
from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

from lisper.core.errors import LisperError
from lisper.core.lang.environment import Environment, create_default_env

DEFAULT_CONFIG_FILE = "lisper.toml"


class LogLevel(StrEnum):
    """Accepted logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LisperConfig(BaseModel):
    """Settings for building an evaluation session."""

    aliases: bool = True
    log_level: LogLevel = LogLevel.WARNING

    model_config = ConfigDict(extra="forbid")

    def create_env(self) -> Environment:
        """Build the default environment these settings describe."""
        return create_default_env(aliases=self.aliases)


def load_config(toml_path: Path) -> LisperConfig:
    """
    Load configuration from lisper.toml.

    Args:
        toml_path: Path to the TOML file

    Returns:
        LisperConfig with values from the file, or defaults when the file
        or its [lisper] table is missing

    Raises:
        LisperError: If the file is not valid TOML or holds invalid values
    """
    if not toml_path.exists():
        return LisperConfig()

    try:
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise LisperError(f"Invalid config file {toml_path}: {e}") from e

    section = data.get("lisper", {})
    if not section:
        return LisperConfig()

    try:
        return LisperConfig.model_validate(section)
    except ValidationError as e:
        raise LisperError(f"Invalid [lisper] settings in {toml_path}: {e}") from e
