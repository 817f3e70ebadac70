"""Search engine for astar_search.

This module implements the best-first search loop over a score-ordered
frontier with a non-reopening closed set.
"""

from .frontier import Frontier
from .options import SearchOptions, DEFAULT_WORK_LIMIT, DEFAULT_TIE_BREAK
from .engine import AStarSearcher, search, create_astar_searcher

__all__ = [
    'Frontier',
    'SearchOptions',
    'DEFAULT_WORK_LIMIT',
    'DEFAULT_TIE_BREAK',
    'AStarSearcher',
    'search',
    'create_astar_searcher'
]
