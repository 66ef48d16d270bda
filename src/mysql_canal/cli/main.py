#!/usr/bin/env python3
"""
Main CLI entry point for the canal configuration tooling.

Prints default configurations and checks configuration files.
"""

import random
import sys

from mysql_canal.cli.args import logging_config_from_args, parse_and_validate_args
from mysql_canal.config.defaults import make_default
from mysql_canal.config.loader import ConfigLoader
from mysql_canal.exceptions import ConfigurationError
from mysql_canal.logger import CanalLogger


def create_logger(args) -> CanalLogger:
    """Create logger instance from command line arguments."""
    return CanalLogger(logging_config_from_args(args))


def run_default(args, logger: CanalLogger) -> int:
    """Print or save a default configuration."""
    rng = random.Random(args.seed) if args.seed is not None else None
    config = make_default(rng)

    if args.output:
        ConfigLoader.save_to_file(config, args.output)
        logger.log_config_written(args.output, config)
    else:
        sys.stdout.write(ConfigLoader.dump_to_text(config))
    return 0


def run_check(args, logger: CanalLogger) -> int:
    """Load a configuration file and log a summary."""
    config = ConfigLoader.load_from_file(args.config_file, args.config_format)
    logger.log_config_loaded(args.config_file, config)
    return 0


def main(argv=None) -> int:
    """Main entry point for the canal configuration CLI."""
    args = parse_and_validate_args(argv)
    logger = create_logger(args)

    try:
        if args.command == "default":
            return run_default(args, logger)
        return run_check(args, logger)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
