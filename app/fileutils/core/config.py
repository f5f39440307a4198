"""User configuration.

This module provides the configuration model and I/O functions for
fileutils. Configuration is stored in ~/.config/fileutils/config.toml and
controls the defaults of the command line interface: the pattern matcher
used by name filters, the mode of new directories, the copy buffer size,
whether destructive commands ask for confirmation, and an optional
search path for `which`.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Literal

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from fileutils.core.paths import get_config_path
from fileutils.operations.operator import DEFAULT_BUFFER_SIZE, DEFAULT_MODE

logger = logging.getLogger(__name__)

MatcherName = Literal["regex", "glob"]


class FileUtilsConfig(BaseModel):
    """Configuration for fileutils.

    Attributes:
        matcher: Pattern matcher used by name filters ("regex" or "glob").
        mkdir_mode: Permission bits for new directories.
        buffer_size: Chunk size in bytes used when copying files.
        interactive: Ask before removing or overwriting entries.
        search_path: Directories searched by `which` (None = use PATH).
    """

    model_config = ConfigDict(extra="forbid")

    matcher: Annotated[
        MatcherName,
        Field(description="Pattern matcher for name filters"),
    ] = "regex"
    mkdir_mode: Annotated[
        int,
        Field(ge=0, le=0o7777, description="Permission bits for new directories"),
    ] = DEFAULT_MODE
    buffer_size: Annotated[
        int,
        Field(ge=1, description="Copy buffer size in bytes"),
    ] = DEFAULT_BUFFER_SIZE
    interactive: Annotated[
        bool,
        Field(description="Ask before removing or overwriting entries"),
    ] = False
    search_path: Annotated[
        list[str] | None,
        Field(description="Directories searched by which (None = use PATH)"),
    ] = None


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> FileUtilsConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated FileUtilsConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return FileUtilsConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def get_config(path: Path | None = None) -> FileUtilsConfig:
    """Load configuration, falling back to defaults when no file exists.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        logger.debug("No config file found, using defaults")
        return FileUtilsConfig()


def save_config(config: FileUtilsConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The FileUtilsConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def _config_to_dict(config: FileUtilsConfig) -> dict[str, object]:
    """Convert FileUtilsConfig to a dictionary for TOML serialization.

    TOML has no null, so an unset search path is omitted.
    """
    return config.model_dump(exclude_none=True)
