"""NetworkX graph conversion utilities.

Converts between undirected NetworkX graphs and `fixpath.graph.Graph`, whose
vertices are contiguous integers. Node names are kept in a `NodeMap` so found
paths can be translated back.

Example:
    >>> import networkx as nx
    >>> from fixpath.nx import from_networkx
    >>> from fixpath.algorithms.fixed_length import fixed_length_search
    >>>
    >>> G = nx.cycle_graph(["a", "b", "c", "d"])
    >>> graph, node_map = from_networkx(G)
    >>> path = fixed_length_search(graph, node_map.to_index["a"], node_map.to_index["c"], 3)
    >>> node_map.names(path)
    ['a', 'b', 'c']
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Hashable, List, Optional, Sequence, Tuple

from fixpath.exceptions import GraphContractError
from fixpath.graph import Graph, VertexID

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = nx.Graph
else:
    NxGraph = Any


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and vertex ids.

    Attributes:
        to_index: Maps original node names to vertex ids.
        to_name: Maps vertex ids back to original node names.

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[Hashable, VertexID] = field(default_factory=dict)
    to_name: Dict[VertexID, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from node names listed in vertex id order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def names(self, path: Optional[Sequence[VertexID]]) -> Optional[List[Hashable]]:
        """Translate a path of vertex ids into node names (None passes through)."""
        if path is None:
            return None
        return [self.to_name[vertex] for vertex in path]

    def __len__(self) -> int:
        """Return the number of nodes in the mapping."""
        return len(self.to_index)


def from_networkx(
    G: NxGraph, *, allow_parallel_edges: bool = True
) -> Tuple[Graph, NodeMap]:
    """Convert an undirected NetworkX graph to a fixpath Graph.

    Vertex ids follow the node iteration order of ``G``. Each edge of a
    MultiGraph becomes a parallel edge.

    Args:
        G: NetworkX Graph or MultiGraph.
        allow_parallel_edges: Passed to the new Graph.

    Returns:
        Tuple of (graph, node_map).

    Raises:
        TypeError: If G is not a NetworkX graph.
        GraphContractError: If G is directed or has self-loops.
    """
    import networkx as nx

    if not isinstance(G, nx.Graph):
        raise TypeError(f"Expected NetworkX Graph or MultiGraph, got {type(G).__name__}")
    if G.is_directed():
        raise GraphContractError("Directed graphs are not supported.")

    node_map = NodeMap.from_names(list(G.nodes()))
    graph = Graph(len(node_map), allow_parallel_edges=allow_parallel_edges)
    for u, v in G.edges():
        graph.add_edge(node_map.to_index[u], node_map.to_index[v])
    return graph, node_map


def to_networkx(graph: Graph, node_map: Optional[NodeMap] = None) -> "nx.MultiGraph":
    """Convert a fixpath Graph to a NetworkX MultiGraph.

    Args:
        graph: Graph to convert.
        node_map: Optional NodeMap to restore original node names. If None,
            nodes are labeled 0, 1, 2, ...

    Returns:
        nx.MultiGraph with one edge per (parallel) graph edge.
    """
    import networkx as nx

    G = nx.MultiGraph()
    if node_map is not None:
        G.add_nodes_from(node_map.to_name.get(idx, idx) for idx in range(graph.size))
    else:
        G.add_nodes_from(range(graph.size))

    for a, b in graph.edges():
        if node_map is not None:
            G.add_edge(node_map.to_name.get(a, a), node_map.to_name.get(b, b))
        else:
            G.add_edge(a, b)
    return G
