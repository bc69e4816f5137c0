"""fixpath: exact-length simple path search on undirected graphs.

Finding a simple path with an exact number of vertices is NP-complete in
general. fixpath offers two fast heuristics for it, plus the BFS primitive
they build on.

Primary API:
    Graph - Mutable undirected adjacency-list graph
    shortest_path() - BFS shortest path
    fixed_length_search() - Bidirectional exact-length search
    yen() - Exact-length search over Yen's k-shortest paths
    from_networkx() - Convert a NetworkX graph to a Graph

Example:
    from fixpath import Graph, fixed_length_search, yen

    graph = Graph(4)
    for a, b in [(0, 1), (1, 2), (2, 3), (0, 3)]:
        graph.add_edge(a, b)

    fixed_length_search(graph, 0, 2, 3)  # [0, 1, 2]
    yen(graph, 0, 2, 2)  # None, 0 and 2 are two edges apart
"""

from __future__ import annotations

from fixpath import logging
from fixpath._version import __version__
from fixpath.algorithms import (
    fixed_length_search,
    is_simple_path,
    ksp,
    shortest_path,
    yen,
)
from fixpath.config import SEARCH_CONFIG, SearchConfig
from fixpath.exceptions import GraphContractError
from fixpath.graph import EdgeEditLog, Graph, graph_edits
from fixpath.nx import NodeMap, from_networkx, to_networkx

__all__ = [
    # Version
    "__version__",
    # Graph
    "Graph",
    "EdgeEditLog",
    "graph_edits",
    # Searches
    "shortest_path",
    "fixed_length_search",
    "yen",
    "ksp",
    "is_simple_path",
    # Configuration
    "SearchConfig",
    "SEARCH_CONFIG",
    # Errors
    "GraphContractError",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
