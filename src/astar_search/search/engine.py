"""Best-first (A*-style) search over an implicit state graph.

The caller supplies two functions:

``neighbor_fn(state)``
    Returns an iterable of ``(edge_label, neighbor_state)`` pairs. Labels
    returned by one call must be distinct; the engine does not check this.

``score_fn(path, state)``
    Returns a heuristic score for reaching ``state`` along ``path`` (a tuple
    of edge labels, newest first), or ``MAX`` when ``state`` is a goal.
    Higher scores are expanded first, so "lower is better" heuristics must
    be negated.

Paths are built by prepending, so results hold edge labels newest first.

A state that has been expanded is never reopened, even if a better route to
it turns up later. Under a heuristic that is admissible but not consistent
the returned path can therefore be suboptimal.
"""

import logging
import time
from typing import Any, Callable, Iterable, Optional, Set, Tuple

from astar_search.config.config_manager import get_parameter
from astar_search.core.data_models import (
    EdgeLabel, Score, SearchOutcome, SearchResult, SearchStatistics, State, is_max
)
from astar_search.search.frontier import Frontier, Path
from astar_search.search.options import DEFAULT_TIE_BREAK, DEFAULT_WORK_LIMIT, SearchOptions

logger = logging.getLogger(__name__)

NeighborFn = Callable[[State], Iterable[Tuple[EdgeLabel, State]]]
ScoreFn = Callable[[Path, State], Score]


class AStarSearcher:
    """Reusable best-first searcher.

    Each call to :meth:`search` builds its own frontier and closed set, so
    calls never influence each other. Statistics of the most recent call are
    kept on the instance.
    """

    def __init__(self, options: Any = None):
        """Initialize searcher.

        Args:
            options: Anything ``SearchOptions.coerce`` accepts. When None, the
                ``search`` section of the loaded global configuration is used
                if there is one, else the defaults.
        """
        if options is None:
            options = get_parameter('search', None)
        self.options = SearchOptions.coerce(options)
        self.statistics = SearchStatistics()

        logger.debug(f"A* searcher initialized with work_limit={self.options.work_limit}, "
                     f"tie_break={self.options.tie_break}")

    def search(self, start: State, neighbor_fn: NeighborFn, score_fn: ScoreFn) -> Optional[SearchResult]:
        """Search from ``start`` until a goal, exhaustion or the work limit.

        Args:
            start: Initial state
            neighbor_fn: Returns ``(edge_label, state)`` pairs for a state
            score_fn: Scores a ``(path, state)`` candidate, ``MAX`` at a goal

        Returns:
            A GOAL_REACHED result, a WORK_LIMITED result carrying the best
            queued entry, or None if the frontier ran dry without a goal.
        """
        start_time = time.perf_counter()
        self.statistics = stats = SearchStatistics()

        frontier = Frontier(self.options.tie_break)
        closed: Set[State] = set()

        start_path: Path = ()
        frontier.push(score_fn(start_path, start), start_path, start)
        stats.nodes_generated = 1
        stats.max_frontier_size = 1
        remaining = self.options.work_limit

        logger.info(f"Starting A* search from {start!r} (work_limit={remaining})")

        while True:
            best = self._pop_open(frontier, closed, stats)

            if remaining == 0:
                if best is None:
                    return self._finish(None, stats, start_time, "exhausted at work limit")
                score, path, state = best
                return self._finish(
                    SearchResult(SearchOutcome.WORK_LIMITED, score, list(path), state, stats),
                    stats, start_time, "work limit reached"
                )

            if best is None:
                return self._finish(None, stats, start_time, "frontier exhausted")

            score, path, state = best
            if is_max(score):
                return self._finish(
                    SearchResult(SearchOutcome.GOAL_REACHED, score, list(path), state, stats),
                    stats, start_time, "goal reached"
                )

            self._expand(state, path, neighbor_fn, score_fn, frontier, closed, stats)
            remaining -= 1

    def _pop_open(self, frontier: Frontier, closed: Set[State],
                  stats: SearchStatistics) -> Optional[Tuple[Score, Path, State]]:
        """Pop the best entry whose state is not closed yet and close it."""
        while True:
            best = frontier.pop()
            if best is None:
                return None
            state = best[2]
            if state in closed:
                # Same state queued twice by one expansion
                stats.stale_entries += 1
                continue
            closed.add(state)
            return best

    def _expand(self, state: State, path: Path, neighbor_fn: NeighborFn, score_fn: ScoreFn,
                frontier: Frontier, closed: Set[State], stats: SearchStatistics) -> None:
        """Queue the unseen neighbors of ``state``."""
        candidates = list(neighbor_fn(state))
        # Membership is decided before any of this expansion's insertions
        fresh = [(label, nstate) for label, nstate in candidates
                 if nstate not in closed and nstate not in frontier]

        for label, nstate in fresh:
            npath = (label,) + path
            if frontier.push(score_fn(npath, nstate), npath, nstate):
                stats.score_collisions += 1

        stats.nodes_expanded += 1
        stats.nodes_generated += len(fresh)
        stats.duplicate_states += len(candidates) - len(fresh)
        stats.update_branching_factor(len(candidates))
        stats.max_frontier_size = max(stats.max_frontier_size, len(frontier))
        if fresh:
            stats.max_depth_reached = max(stats.max_depth_reached, len(path) + 1)

        logger.debug(f"Expanded {state!r}: {len(candidates)} neighbors, {len(fresh)} queued, "
                     f"frontier={len(frontier)}")

    def _finish(self, result: Optional[SearchResult], stats: SearchStatistics,
                start_time: float, reason: str) -> Optional[SearchResult]:
        stats.computation_time = time.perf_counter() - start_time
        logger.info(f"A* search finished ({reason}): expanded={stats.nodes_expanded}, "
                    f"generated={stats.nodes_generated}, "
                    f"time={stats.computation_time:.4f}s")
        return result

    def get_search_stats(self) -> dict:
        """Statistics of the most recent search plus the options used."""
        stats = self.statistics.to_dict()
        stats['options'] = self.options.to_dict()
        return stats


def search(start: State, neighbor_fn: NeighborFn, score_fn: ScoreFn,
           options: Any = None) -> Optional[SearchResult]:
    """Run a best-first search.

    Args:
        start: Initial state, any hashable value
        neighbor_fn: ``state -> iterable of (edge_label, state)``
        score_fn: ``(path, state) -> score or MAX``; path is newest first
        options: None, ``SearchOptions``, mapping, pair list or DictConfig.
            Recognized keys are ``work_limit`` (default 10000) and
            ``tie_break`` (``lifo``, ``fifo`` or ``overwrite``)

    Returns:
        SearchResult, or None when no goal is reachable

    Raises:
        ConfigValidationError: If ``options`` is malformed
    """
    return AStarSearcher(SearchOptions.coerce(options)).search(start, neighbor_fn, score_fn)


def create_astar_searcher(work_limit: int = DEFAULT_WORK_LIMIT,
                          tie_break: str = DEFAULT_TIE_BREAK) -> AStarSearcher:
    """Factory function to create an A* searcher with custom options.

    Args:
        work_limit: Maximum number of expansions
        tie_break: Equal-score policy

    Returns:
        Configured AStarSearcher instance
    """
    return AStarSearcher(SearchOptions(work_limit=work_limit, tie_break=tie_break))
