"""Core data models for the A* search engine."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Hashable, List, Union


class _MaxScore:
    """Sentinel score meaning "goal reached".

    Compares greater than every other score and equal only to itself.
    """

    _instance = None

    def __new__(cls) -> '_MaxScore':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __eq__(self, other: object) -> bool:
        return other is self

    def __ne__(self, other: object) -> bool:
        return other is not self

    def __lt__(self, other: object) -> bool:
        return False

    def __le__(self, other: object) -> bool:
        return other is self

    def __gt__(self, other: object) -> bool:
        return other is not self

    def __ge__(self, other: object) -> bool:
        return True

    def __hash__(self) -> int:
        return hash('astar_search.MAX')

    def __repr__(self) -> str:
        return 'MAX'

    def __reduce__(self):
        return (_MaxScore, ())


MAX = _MaxScore()

State = Hashable
EdgeLabel = Any
Score = Union[int, float, _MaxScore]


def is_max(score: Any) -> bool:
    """Return True if ``score`` is the goal sentinel."""
    return score is MAX


class SearchOutcome(Enum):
    """Terminal outcomes that carry a node. Exhaustion is reported as None."""
    GOAL_REACHED = "goal_reached"
    WORK_LIMITED = "work_limited"


@dataclass
class SearchStatistics:
    """Counters collected during a single search call."""
    nodes_expanded: int = 0
    nodes_generated: int = 0
    duplicate_states: int = 0  # candidates dropped because closed or queued
    stale_entries: int = 0  # popped entries whose state was already closed
    score_collisions: int = 0
    max_frontier_size: int = 0
    max_depth_reached: int = 0
    average_branching_factor: float = 0.0
    computation_time: float = 0.0

    def update_branching_factor(self, total_successors: int) -> None:
        """Update average branching factor."""
        if self.nodes_expanded > 0:
            self.average_branching_factor = (
                (self.average_branching_factor * (self.nodes_expanded - 1) + total_successors)
                / self.nodes_expanded
            )
        else:
            self.average_branching_factor = float(total_successors)

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to dictionary."""
        return {
            'nodes_expanded': self.nodes_expanded,
            'nodes_generated': self.nodes_generated,
            'duplicate_states': self.duplicate_states,
            'stale_entries': self.stale_entries,
            'score_collisions': self.score_collisions,
            'max_frontier_size': self.max_frontier_size,
            'max_depth_reached': self.max_depth_reached,
            'average_branching_factor': self.average_branching_factor,
            'computation_time': self.computation_time,
        }


@dataclass
class SearchResult:
    """Node returned by a search that reached the goal or ran out of work.

    ``path`` holds edge labels newest first: ``path[0]`` is the edge that
    led into ``state``. Use :meth:`chronological_path` for start-to-state
    order.
    """
    outcome: SearchOutcome
    score: Score
    path: List[EdgeLabel]
    state: State
    statistics: SearchStatistics = field(default_factory=SearchStatistics, compare=False, repr=False)

    @property
    def goal_reached(self) -> bool:
        return self.outcome is SearchOutcome.GOAL_REACHED

    @property
    def work_limited(self) -> bool:
        return self.outcome is SearchOutcome.WORK_LIMITED

    def chronological_path(self) -> List[EdgeLabel]:
        """Edge labels from the start state to ``state``."""
        return list(reversed(self.path))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'outcome': self.outcome.value,
            'score': 'max' if is_max(self.score) else self.score,
            'path': list(self.path),
            'state': self.state,
            'statistics': self.statistics.to_dict(),
        }
