"""Configuration validation for the A* search engine."""

import logging
import numbers
from typing import Any, List, Mapping

from omegaconf import DictConfig

logger = logging.getLogger(__name__)

TIE_BREAK_POLICIES = ("lifo", "fifo", "overwrite")
SEARCH_KEYS = ("work_limit", "tie_break")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigValidationError(Exception):
    """Exception raised when configuration validation fails."""
    pass


def validate_config(config: DictConfig) -> None:
    """Validate the complete configuration.

    Args:
        config: Configuration to validate

    Raises:
        ConfigValidationError: If validation fails
    """
    try:
        validate_search_config(config.get('search', {}))
        validate_logging_config(config.get('logging', {}))
    except ConfigValidationError:
        raise
    except Exception as e:
        raise ConfigValidationError(f"Configuration validation failed: {e}") from e

    logger.info("Configuration validation passed")


def validate_work_limit(work_limit: Any) -> None:
    """Validate a work limit value.

    Zero is accepted and means "do not expand anything".
    """
    # bool is an int subclass, reject it explicitly
    if isinstance(work_limit, bool) or not isinstance(work_limit, numbers.Integral):
        raise ConfigValidationError(
            f"work_limit must be an integer, got {work_limit!r}"
        )
    if work_limit < 0:
        raise ConfigValidationError(
            f"work_limit must be non-negative, got {work_limit}"
        )


def validate_tie_break(tie_break: Any) -> None:
    """Validate the equal-score tie-break policy name."""
    if tie_break not in TIE_BREAK_POLICIES:
        raise ConfigValidationError(
            f"tie_break must be one of {', '.join(TIE_BREAK_POLICIES)}, got {tie_break!r}"
        )


def validate_search_config(search_config: Mapping) -> None:
    """Validate search configuration section.

    Args:
        search_config: Search configuration section
    """
    if not search_config:
        return

    unknown = sorted(str(key) for key in search_config.keys() if key not in SEARCH_KEYS)
    if unknown:
        raise ConfigValidationError(
            f"Unknown search option(s): {', '.join(unknown)}"
        )

    if 'work_limit' in search_config:
        validate_work_limit(search_config.get('work_limit'))
    if 'tie_break' in search_config:
        validate_tie_break(search_config.get('tie_break'))


def validate_logging_config(logging_config: Mapping) -> None:
    """Validate logging configuration section.

    Args:
        logging_config: Logging configuration section
    """
    if not logging_config:
        return

    level = logging_config.get('level', 'INFO')
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        raise ConfigValidationError(
            f"logging.level must be one of {', '.join(LOG_LEVELS)}, got {level!r}"
        )


def check_config_consistency(config: DictConfig) -> List[str]:
    """Check configuration for settings that are valid but likely unintended.

    Args:
        config: Configuration to check

    Returns:
        List of warnings
    """
    warnings = []
    search_config = config.get('search', {}) or {}

    if search_config.get('work_limit') == 0:
        warnings.append("work_limit is 0: searches return the start state without expanding it")

    if search_config.get('tie_break') == 'overwrite':
        warnings.append(
            "tie_break=overwrite drops frontier entries whose score equals a later insertion"
        )

    return warnings
