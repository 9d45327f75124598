"""
Global configuration for the ZeroNet address tooling.

This module contains environment-specific settings read once at import time.
"""

import os

_SUPPORTED_LOG_LEVELS: list[str] = ["DEBUG", "INFO", "WARNING", "ERROR"]


def parse_log_level(raw: str) -> str:
    """
    Normalize a log level name read from the environment.

    Raises:
        ValueError: If the level is not one of the supported names.
    """
    level = raw.strip().upper()
    if level not in _SUPPORTED_LOG_LEVELS:
        raise ValueError(
            f"Invalid ZERONET_LOG_LEVEL environment variable: '{raw}'. "
            f"Supported values: {_SUPPORTED_LOG_LEVELS}"
        )
    return level


ZERONET_LOG_LEVEL = parse_log_level(os.environ.get("ZERONET_LOG_LEVEL", "INFO"))
"""Default log level for the CLI ('INFO' unless overridden). `--verbose` forces 'DEBUG'."""
