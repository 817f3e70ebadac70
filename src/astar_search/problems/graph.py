"""Explicit adjacency-table problems."""

from typing import Any, Callable, Hashable, Iterable, List, Mapping, Optional, Sequence, Tuple

from astar_search.core.data_models import MAX, Score, SearchResult
from astar_search.search.engine import search

Edge = Tuple[Any, Hashable]


def _depth_penalty(path: Sequence[Any], state: Hashable) -> Score:
    return -len(path)


class AdjacencyGraph:
    """Graph given as ``state -> [(edge_label, state), ...]``.

    States missing from the table use ``default_edges``. Reaching any state in
    ``goals`` scores ``MAX``; other states are scored by ``heuristic``, which
    defaults to preferring shorter paths.
    """

    def __init__(self,
                 edges: Mapping[Hashable, Iterable[Edge]],
                 goals: Iterable[Hashable] = (),
                 default_edges: Iterable[Edge] = (),
                 heuristic: Optional[Callable[[Sequence[Any], Hashable], Score]] = None):
        self.edges = {state: list(out) for state, out in edges.items()}
        self.goals = frozenset(goals)
        self.default_edges = list(default_edges)
        self.heuristic = heuristic or _depth_penalty

    def neighbors(self, state: Hashable) -> List[Edge]:
        return list(self.edges.get(state, self.default_edges))

    def score(self, path: Sequence[Any], state: Hashable) -> Score:
        if state in self.goals:
            return MAX
        return self.heuristic(path, state)

    def solve(self, start: Hashable, options: Any = None) -> Optional[SearchResult]:
        return search(start, self.neighbors, self.score, options)
