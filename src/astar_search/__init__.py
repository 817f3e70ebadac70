"""Generic best-first (A*-style) graph search.

Typical use::

    from astar_search import MAX, search

    result = search(start, neighbor_fn, score_fn, {"work_limit": 500})
    if result is not None and result.goal_reached:
        print(result.chronological_path())
"""

from astar_search.config import ConfigValidationError
from astar_search.core.data_models import (
    MAX, SearchOutcome, SearchResult, SearchStatistics, is_max
)
from astar_search.search import (
    AStarSearcher, Frontier, SearchOptions, DEFAULT_WORK_LIMIT, create_astar_searcher, search
)

__version__ = "0.1.0"

__all__ = [
    'MAX',
    'is_max',
    'search',
    'AStarSearcher',
    'create_astar_searcher',
    'Frontier',
    'SearchOptions',
    'SearchOutcome',
    'SearchResult',
    'SearchStatistics',
    'DEFAULT_WORK_LIMIT',
    'ConfigValidationError',
]
