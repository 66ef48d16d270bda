"""
Canal logger.

This module provides logging functionality for the canal configuration
tooling with structured (JSON) or human-readable output. Library modules
log through child loggers of "mysql_canal" and leave handler setup to
CanalLogger.
"""

import json
import logging
import sys
from pathlib import Path
from typing import List, Union

from mysql_canal.config.models import CanalConfig, LoggingConfig

ROOT_LOGGER_NAME = "mysql_canal"

# record attributes copied into JSON output when a call passes them as extras
EXTRA_FIELDS = ("config_path", "config_format", "server_id", "dump_enabled")


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record):
        """Format log record as JSON."""
        log_entry = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        log_entry.update(
            {name: getattr(record, name) for name in EXTRA_FIELDS if hasattr(record, name)}
        )

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


class TextFormatter(logging.Formatter):
    """Text formatter for human-readable logging."""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


def build_handlers(config: LoggingConfig) -> List[logging.Handler]:
    """
    Create the handlers a logging configuration asks for.

    Output always goes to stdout; a file handler is added when log_to_file
    is set together with log_file_path. Missing parent directories of the
    log file are created.
    """
    formatter = JSONFormatter() if config.format == "json" else TextFormatter()
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if config.log_to_file and config.log_file_path:
        log_path = Path(config.log_file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


class CanalLogger:
    """Logger for canal configuration tooling."""

    def __init__(self, config: LoggingConfig = None):
        """
        Initialize the "mysql_canal" logger.

        Args:
            config: Logging configuration, text output at INFO when omitted
        """
        self.logger = logging.getLogger(ROOT_LOGGER_NAME)
        self.logger.propagate = False
        self.setup_logging(config or LoggingConfig())

    def setup_logging(self, config: LoggingConfig) -> None:
        """Replace the current handlers with the ones config asks for."""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

        self.logger.setLevel(getattr(logging, config.level))
        for handler in build_handlers(config):
            self.logger.addHandler(handler)

    def debug(self, message: str, **kwargs) -> None:
        self.logger.debug(message, extra=kwargs)

    def info(self, message: str, **kwargs) -> None:
        self.logger.info(message, extra=kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self.logger.warning(message, extra=kwargs)

    def error(self, message: str, exc_info: bool = False, **kwargs) -> None:
        self.logger.error(message, exc_info=exc_info, extra=kwargs)

    def log_config_loaded(
        self, config_path: Union[str, Path], config: CanalConfig
    ) -> None:
        """Log a one-line summary of a configuration read from config_path."""
        dump_state = "enabled" if config.dump.enabled else "disabled"
        self.logger.info(
            f"Configuration {config_path} is valid: addr={config.address or '-'} "
            f"server_id={config.server_id} flavor={config.flavor or '-'} "
            f"dump={dump_state}",
            extra={
                "config_path": str(config_path),
                "server_id": config.server_id,
                "dump_enabled": config.dump.enabled,
            },
        )
        if config.server_id == 0:
            self.logger.warning(
                f"server_id is not set in {config_path}",
                extra={"config_path": str(config_path)},
            )

    def log_config_written(
        self, config_path: Union[str, Path], config: CanalConfig
    ) -> None:
        """Log that a configuration was saved to config_path."""
        self.logger.info(
            f"Wrote default configuration to {config_path} "
            f"(server_id {config.server_id})",
            extra={"config_path": str(config_path), "server_id": config.server_id},
        )
