"""
Core exceptions for the canal configuration package.

This module defines custom exception classes raised while reading,
decoding and writing canal configuration documents.
"""


class CanalError(Exception):
    """Base exception for canal errors."""


class ConfigurationError(CanalError):
    """Raised when there are configuration-related errors."""


class ConfigIOError(ConfigurationError):
    """Raised when a configuration file cannot be read or written."""


class ConfigDecodeError(ConfigurationError):
    """Raised when a configuration document cannot be parsed or its values
    do not match the declared field types."""
