"""Path search algorithms over `fixpath.graph.Graph`."""

from fixpath.algorithms.bfs import bfs, shortest_path
from fixpath.algorithms.fixed_length import fixed_length_search
from fixpath.algorithms.paths import is_simple_path
from fixpath.algorithms.yen import ksp, yen

__all__ = [
    "bfs",
    "shortest_path",
    "fixed_length_search",
    "ksp",
    "yen",
    "is_simple_path",
]
