"""
Configuration module for the canal client.

This module provides configuration loading, validation and defaults
using Pydantic models.
"""

from mysql_canal.config.defaults import make_default, random_server_id
from mysql_canal.config.loader import (
    ConfigLoader,
    load_config,
    load_config_text,
    save_config,
)
from mysql_canal.config.models import CanalConfig, DumpConfig, LoggingConfig

__all__ = [
    "ConfigLoader",
    "CanalConfig",
    "DumpConfig",
    "LoggingConfig",
    "load_config",
    "load_config_text",
    "save_config",
    "make_default",
    "random_server_id",
]
