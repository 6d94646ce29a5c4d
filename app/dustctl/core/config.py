"""Configuration file I/O.

This module provides the configuration models and functions for loading
and saving the dustctl configuration in TOML format, validated with
Pydantic.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from dustctl.core.paths import get_config_path
from dustctl.sweep.matcher import DEFAULT_ARTIFACT_NAMES, PathMatcher

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file is not valid TOML."""


class ConfigValidationError(ConfigError):
    """Raised when the configuration content is invalid."""


class SweepConfig(BaseModel):
    """Settings for scanning and deleting artifact directories.

    Attributes:
        artifact_names: Directory names treated as build artifacts.
        max_workers: Thread pool size for the size and deletion passes.
            None lets the executor pick its default.
    """

    model_config = ConfigDict(extra="forbid")

    artifact_names: list[str] = Field(default_factory=lambda: list(DEFAULT_ARTIFACT_NAMES))
    max_workers: int | None = Field(default=None, ge=1)

    @field_validator("artifact_names")
    @classmethod
    def validate_artifact_names(cls, v: list[str]) -> list[str]:
        """Strip names, drop duplicates and reject invalid entries."""
        names = list(dict.fromkeys(name.strip() for name in v))
        # PathMatcher enforces the same rules used at scan time
        PathMatcher(names)
        return names

    def build_matcher(self) -> PathMatcher:
        """Create a PathMatcher for the configured artifact names."""
        return PathMatcher(self.artifact_names)


class AppConfig(BaseModel):
    """Root configuration model for dustctl."""

    model_config = ConfigDict(extra="forbid")

    sweep: SweepConfig = Field(default_factory=SweepConfig)


def load_config(path: Path | None = None) -> AppConfig:
    """Load and validate the configuration from a TOML file.

    A missing file is not an error: defaults are returned.

    Args:
        path: Path to the configuration file. If None, uses the default path.

    Returns:
        Validated AppConfig object.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
        ConfigError: If the file cannot be read.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return AppConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return AppConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: AppConfig, path: Path | None = None) -> Path:
    """Save the configuration to a TOML file.

    The file is written atomically through a temporary file in the same
    directory followed by os.replace().

    Args:
        config: The AppConfig object to save.
        path: Destination path. If None, uses the default path.

    Returns:
        Path where the configuration was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    data = config_to_dict(config)

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
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
        raise ConfigError(f"Failed to write config {config_path}: {e}") from e

    return config_path


def require_config(config_path: Path | None = None) -> AppConfig:
    """Load configuration or exit with a helpful error message.

    Args:
        config_path: Optional custom configuration path.

    Returns:
        Loaded and validated AppConfig.

    Raises:
        typer.Exit: If the configuration cannot be loaded.
    """
    import typer

    from dustctl.utils.formatting import print_error

    try:
        return load_config(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def config_to_dict(config: AppConfig) -> dict[str, Any]:
    """Convert an AppConfig to a dictionary suitable for TOML serialization.

    TOML has no null, so unset optional values are omitted.
    """
    sweep: dict[str, Any] = {"artifact_names": list(config.sweep.artifact_names)}
    if config.sweep.max_workers is not None:
        sweep["max_workers"] = config.sweep.max_workers
    return {"sweep": sweep}
