"""Search options and their coercion from user-supplied values."""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Mapping

from omegaconf import DictConfig, OmegaConf

from astar_search.config.validators import (
    ConfigValidationError, validate_search_config
)

DEFAULT_WORK_LIMIT = 10000
DEFAULT_TIE_BREAK = "lifo"

# Accepted spellings for option keys
_KEY_ALIASES = {
    'worklimit': 'work_limit',
    'workLimit': 'work_limit',
    'tieBreak': 'tie_break',
}


@dataclass(frozen=True)
class SearchOptions:
    """Options for a single search call."""
    work_limit: int = DEFAULT_WORK_LIMIT  # expansion steps before giving up
    tie_break: str = DEFAULT_TIE_BREAK  # lifo, fifo or overwrite

    def __post_init__(self):
        validate_search_config(asdict(self))
        # numpy and other Integral types are stored as plain int
        object.__setattr__(self, 'work_limit', int(self.work_limit))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def coerce(cls, options: Any = None) -> 'SearchOptions':
        """Build options from None, a SearchOptions, a DictConfig, a mapping
        or an iterable of ``(key, value)`` pairs.

        Raises:
            ConfigValidationError: If the options are malformed
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if isinstance(options, DictConfig):
            options = OmegaConf.to_container(options, resolve=True)

        if isinstance(options, Mapping):
            raw = dict(options)
        else:
            try:
                raw = dict(options)
            except (TypeError, ValueError) as e:
                raise ConfigValidationError(f"Invalid search options {options!r}: {e}") from e

        normalized = {}
        for key, value in raw.items():
            normalized[_KEY_ALIASES.get(key, key)] = value

        validate_search_config(normalized)
        return cls(**normalized)
