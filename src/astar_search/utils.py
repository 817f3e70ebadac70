"""Utility functions."""

import logging
from typing import Optional, Union


def setup_logging(level: Union[int, str] = logging.INFO,
                  format_string: Optional[str] = None) -> None:
    """Setup logging configuration.

    Args:
        level: Logging level, as a number or a name such as ``"DEBUG"``
        format_string: Custom format string
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {level}")

    if format_string is None:
        if level <= logging.DEBUG:
            format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_string = "%(levelname)s: %(message)s"

    logging.basicConfig(
        level=level,
        format=format_string,
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    logging.getLogger('astar_search').setLevel(level)


def setup_logging_from_config(config) -> None:
    """Apply the ``logging`` section of a loaded configuration."""
    level = config.get('logging', {}).get('level', 'INFO')
    setup_logging(level)
