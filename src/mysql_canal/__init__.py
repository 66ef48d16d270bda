"""
MySQL canal client configuration.

Configuration schema, loading and defaults for a MySQL binlog
change-data-capture client and its mysqldump snapshot step.
"""

from mysql_canal.config import CanalConfig, ConfigLoader, DumpConfig, make_default
from mysql_canal.exceptions import (
    CanalError,
    ConfigDecodeError,
    ConfigIOError,
    ConfigurationError,
)

__version__ = "1.0.0"

__all__ = [
    "CanalConfig",
    "ConfigLoader",
    "DumpConfig",
    "make_default",
    "CanalError",
    "ConfigurationError",
    "ConfigIOError",
    "ConfigDecodeError",
]
