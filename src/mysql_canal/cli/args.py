"""
Argument parsing and validation for the canal configuration CLI.

This module handles command line argument parsing and validation for
the mysql-canal-config tool.
"""

import argparse
from pathlib import Path
from typing import List, Optional

from mysql_canal.config.models import LoggingConfig
from mysql_canal.constants import CONFIG_FORMAT_TOML, CONFIG_FORMAT_YAML

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="mysql-canal-config",
        description="Generate and check MySQL canal client configuration files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print a default configuration
  mysql-canal-config default

  # Write a default configuration with a reproducible server id
  mysql-canal-config default --seed 42 --output canal.yaml

  # Check a configuration file
  mysql-canal-config check canal.toml
        """,
    )

    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--log-format",
        type=str.lower,
        choices=["text", "json"],
        default="text",
        help="Logging output format (default: text)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    default_parser = subparsers.add_parser(
        "default", help="Print or save a default configuration as YAML"
    )
    default_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Write the configuration to this file instead of stdout",
    )
    default_parser.add_argument(
        "--seed",
        type=int,
        help="Seed for the random server id",
    )

    check_parser = subparsers.add_parser(
        "check", help="Load a configuration file and report whether it is valid"
    )
    check_parser.add_argument("config_file", type=Path, help="Configuration file")
    check_parser.add_argument(
        "--format",
        dest="config_format",
        type=str.lower,
        choices=[CONFIG_FORMAT_TOML, CONFIG_FORMAT_YAML],
        help="Document format (default: from the file suffix)",
    )

    return parser


def logging_config_from_args(args: argparse.Namespace) -> LoggingConfig:
    """Build the logging configuration requested on the command line."""
    return LoggingConfig(level=args.log_level, format=args.log_format)


def parse_and_validate_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Args:
        argv: Argument list, defaults to sys.argv[1:]

    Returns:
        Parsed arguments namespace
    """
    parser = create_parser()
    return parser.parse_args(argv)
