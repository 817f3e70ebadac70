"""Score-ordered open set for best-first search.

The frontier pops the entry with the *largest* score. Entries live in a
binary heap; removals caused by score collisions are lazy, so a per-state
counter of live entries answers membership queries.
"""

import heapq
from collections import Counter
from typing import Dict, List, Optional, Tuple

from astar_search.config.validators import TIE_BREAK_POLICIES, ConfigValidationError
from astar_search.core.data_models import EdgeLabel, Score, State

Path = Tuple[EdgeLabel, ...]

TIE_BREAK_LIFO = "lifo"
TIE_BREAK_FIFO = "fifo"
TIE_BREAK_OVERWRITE = "overwrite"


class FrontierEntry:
    """Heap entry. Sorts before another entry when it should pop first."""

    __slots__ = ('score', 'order', 'path', 'state', 'removed')

    def __init__(self, score: Score, order: int, path: Path, state: State):
        self.score = score
        self.order = order
        self.path = path
        self.state = state
        self.removed = False

    def __lt__(self, other: 'FrontierEntry') -> bool:
        if self.score != other.score:
            return self.score > other.score
        return self.order < other.order

    def __repr__(self) -> str:
        return f"FrontierEntry(score={self.score!r}, path={self.path!r}, state={self.state!r})"


class Frontier:
    """Open set keyed by score.

    With the ``overwrite`` policy the score is the only key, so inserting a
    second entry with an equal score replaces the first one. The other
    policies keep every entry and only decide which equal-scored entry pops
    first.
    """

    def __init__(self, tie_break: str = TIE_BREAK_LIFO):
        if tie_break not in TIE_BREAK_POLICIES:
            raise ConfigValidationError(f"Unknown tie_break policy: {tie_break!r}")
        self.tie_break = tie_break
        self._heap: List[FrontierEntry] = []
        self._by_score: Dict[Score, FrontierEntry] = {}
        self._state_counts: Counter = Counter()
        self._counter = 0
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, state: State) -> bool:
        return self._state_counts.get(state, 0) > 0

    def push(self, score: Score, path: Path, state: State) -> bool:
        """Insert an entry.

        Returns:
            True if an existing entry with the same score was replaced

        Raises:
            ValueError: If ``score`` is NaN
        """
        # NaN is the only score unequal to itself
        if score != score:
            raise ValueError(f"Score for state {state!r} is not ordered: {score!r}")

        self._counter += 1
        order = self._counter if self.tie_break == TIE_BREAK_FIFO else -self._counter
        entry = FrontierEntry(score, order, path, state)

        replaced = False
        if self.tie_break == TIE_BREAK_OVERWRITE:
            previous = self._by_score.get(score)
            if previous is not None:
                self._discard(previous)
                replaced = True
            self._by_score[score] = entry

        heapq.heappush(self._heap, entry)
        self._state_counts[state] += 1
        self._size += 1
        return replaced

    def pop(self) -> Optional[Tuple[Score, Path, State]]:
        """Remove and return the best ``(score, path, state)``, or None if empty."""
        while self._heap:
            entry = heapq.heappop(self._heap)
            if entry.removed:
                continue
            self._discard(entry)
            return entry.score, entry.path, entry.state
        return None

    def peek(self) -> Optional[Tuple[Score, Path, State]]:
        """Return the best entry without removing it."""
        while self._heap and self._heap[0].removed:
            heapq.heappop(self._heap)
        if not self._heap:
            return None
        entry = self._heap[0]
        return entry.score, entry.path, entry.state

    def _discard(self, entry: FrontierEntry) -> None:
        entry.removed = True
        self._size -= 1
        remaining = self._state_counts[entry.state] - 1
        if remaining > 0:
            self._state_counts[entry.state] = remaining
        else:
            del self._state_counts[entry.state]
        if self._by_score.get(entry.score) is entry:
            del self._by_score[entry.score]
