"""
Configuration loader for the canal client.

This module handles loading and validating TOML (or YAML) configuration
documents using Pydantic models, and writing configurations back out.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from mysql_canal.config.models import CanalConfig
from mysql_canal.constants import (
    CONFIG_FORMAT_TOML,
    CONFIG_FORMAT_YAML,
    YAML_SUFFIXES,
)
from mysql_canal.exceptions import ConfigDecodeError, ConfigIOError

logger = logging.getLogger("mysql_canal.config")


class ConfigLoader:
    """Configuration loader for the canal client."""

    @staticmethod
    def load_from_file(
        config_path: Union[str, Path], fmt: Optional[str] = None
    ) -> CanalConfig:
        """
        Load and validate configuration from a file.

        Args:
            config_path: Path to the configuration file
            fmt: "toml" or "yaml". Defaults to YAML for .yaml/.yml files
                and TOML for anything else.

        Returns:
            Validated CanalConfig instance

        Raises:
            ConfigIOError: If the file cannot be read
            ConfigDecodeError: If the file content is invalid
        """
        config_path = Path(config_path)

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigIOError(
                f"Error reading configuration file {config_path}: {e}"
            ) from e

        if fmt is None:
            fmt = ConfigLoader.format_for_path(config_path)

        config = ConfigLoader.load_from_text(text, fmt)
        logger.debug(
            f"Loaded configuration from {config_path}",
            extra={"config_path": str(config_path), "config_format": fmt},
        )
        return config

    @staticmethod
    def load_from_text(text: str, fmt: str = CONFIG_FORMAT_TOML) -> CanalConfig:
        """
        Parse and validate a configuration document.

        An empty document gives a configuration with every field unset.

        Args:
            text: Document content
            fmt: "toml" or "yaml"

        Returns:
            Validated CanalConfig instance

        Raises:
            ConfigDecodeError: If the document is malformed or a value has
                the wrong type
        """
        fmt = fmt.lower()

        if fmt == CONFIG_FORMAT_TOML:
            try:
                config_data = tomllib.loads(text)
            except tomllib.TOMLDecodeError as e:
                raise ConfigDecodeError(f"Error parsing TOML configuration: {e}") from e
        elif fmt in (CONFIG_FORMAT_YAML, "yml"):
            try:
                config_data = yaml.safe_load(text)
            except yaml.YAMLError as e:
                raise ConfigDecodeError(f"Error parsing YAML configuration: {e}") from e
            if config_data is None:
                config_data = {}
        else:
            raise ConfigDecodeError(f"Unsupported configuration format: {fmt}")

        return ConfigLoader.load_from_dict(config_data)

    @staticmethod
    def load_from_dict(config_data: dict) -> CanalConfig:
        """
        Validate a configuration dictionary.

        Args:
            config_data: Dictionary keyed by document keys (addr, server_id, dump, ...)

        Returns:
            Validated CanalConfig instance

        Raises:
            ConfigDecodeError: If the configuration is invalid
        """
        if not isinstance(config_data, dict):
            raise ConfigDecodeError(
                "Configuration document must be a mapping, "
                f"got {type(config_data).__name__}"
            )

        try:
            return CanalConfig.model_validate(config_data)
        except ValidationError as e:
            raise ConfigDecodeError(f"Configuration validation failed: {e}") from e

    @staticmethod
    def dump_to_text(config: CanalConfig) -> str:
        """
        Render a configuration as a YAML document.

        Durations are written as strings such as "1m30s" and the timestamp
        location by zone name, so the output loads back to an equal config.
        """
        config_dict = config.model_dump(mode="json", by_alias=True, exclude_none=True)
        return yaml.safe_dump(
            config_dict,
            default_flow_style=False,
            indent=2,
            sort_keys=False,
            allow_unicode=True,
        )

    @staticmethod
    def save_to_file(config: CanalConfig, config_path: Union[str, Path]) -> None:
        """
        Save a configuration to a YAML file.

        Args:
            config: CanalConfig instance to save
            config_path: Path where to save the configuration

        Raises:
            ConfigIOError: If saving fails
        """
        config_path = Path(config_path)
        text = ConfigLoader.dump_to_text(config)

        try:
            with open(config_path, "w", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            raise ConfigIOError(f"Error saving configuration: {e}") from e

    @staticmethod
    def format_for_path(config_path: Union[str, Path]) -> str:
        """Pick the document format from a file suffix."""
        if Path(config_path).suffix.lower() in YAML_SUFFIXES:
            return CONFIG_FORMAT_YAML
        return CONFIG_FORMAT_TOML


# Convenience functions
def load_config(config_path: Union[str, Path]) -> CanalConfig:
    """Load configuration from file."""
    return ConfigLoader.load_from_file(config_path)


def load_config_text(text: str, fmt: str = CONFIG_FORMAT_TOML) -> CanalConfig:
    """Load configuration from a document string."""
    return ConfigLoader.load_from_text(text, fmt)


def save_config(config: CanalConfig, config_path: Union[str, Path]) -> None:
    """Save configuration to file."""
    return ConfigLoader.save_to_file(config, config_path)
