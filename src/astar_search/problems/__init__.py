"""Ready-made problems for the search engine."""

from .grid import GridMaze
from .graph import AdjacencyGraph

__all__ = ['GridMaze', 'AdjacencyGraph']
