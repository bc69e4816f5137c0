"""Undirected, unweighted adjacency-list graph with in-place edge edits.

`Graph` stores a fixed number of vertices ``0..size-1``. Each vertex keeps an
ordered list of neighbor ids; adding an edge appends to both endpoints, so the
lists stay symmetric after every paired mutation. Parallel edges are kept
unless the graph is built with ``allow_parallel_edges=False``.

`graph_edits()` wraps temporary removals in an undo log that is replayed on
exit, which is how Yen's search prunes the graph between spur computations.
"""

from __future__ import annotations

from collections import Counter
from contextlib import contextmanager
from pickle import dumps, loads
from typing import Iterator, List, Sequence, Tuple

from fixpath.exceptions import GraphContractError

VertexID = int
Edge = Tuple[VertexID, VertexID]


class Graph:
    """An undirected multigraph over integer vertices ``0..size-1``.

    This class enforces:
      - A fixed vertex count set at construction.
      - Vertex ids must be integers in ``[0, size)``.
      - No self-loops (raises GraphContractError).
      - Removing a non-existent edge raises GraphContractError.

    Mutations are in place and not thread-safe.
    """

    def __init__(self, size: int, allow_parallel_edges: bool = True) -> None:
        """Initialize a graph with ``size`` isolated vertices.

        Args:
            size: Number of vertices.
            allow_parallel_edges: If False, ``add_edge`` skips edges that
                already exist instead of adding a parallel copy.

        Raises:
            GraphContractError: If size is negative.
        """
        if not _is_int(size) or size < 0:
            raise GraphContractError(f"Graph size must be a non-negative int, got {size!r}.")
        self.size = size
        self.allow_parallel_edges = allow_parallel_edges
        self._adj: List[List[VertexID]] = [[] for _ in range(size)]

    def __len__(self) -> int:
        return self.size

    def __contains__(self, vertex: object) -> bool:
        return _is_int(vertex) and 0 <= vertex < self.size

    def __repr__(self) -> str:
        return f"Graph(size={self.size}, edges={self.edge_count()})"

    def check_vertex(self, vertex: VertexID) -> None:
        """Raise GraphContractError unless ``vertex`` is a valid id."""
        if vertex not in self:
            raise GraphContractError(
                f"Vertex {vertex!r} is out of range for a graph of size {self.size}."
            )

    def copy(self) -> Graph:
        """Return a pickle-based deep copy of this graph."""
        return loads(dumps(self))

    #
    # Edge management
    #
    def add_edge(self, a: VertexID, b: VertexID) -> None:
        """Add an undirected edge between ``a`` and ``b``.

        Raises:
            GraphContractError: If either vertex is invalid or ``a == b``.
        """
        self.check_vertex(a)
        self.check_vertex(b)
        if a == b:
            raise GraphContractError(f"Self-loop on vertex {a} is not allowed.")
        if not self.allow_parallel_edges and b in self._adj[a]:
            return
        self._adj[a].append(b)
        self._adj[b].append(a)

    def remove_edge(self, a: VertexID, b: VertexID) -> None:
        """Remove one edge between ``a`` and ``b``.

        Neighbor order is not preserved: the last entry of each list takes the
        removed entry's slot.

        Raises:
            GraphContractError: If either vertex is invalid or the edge is absent.
        """
        self.check_vertex(a)
        self.check_vertex(b)
        if b not in self._adj[a]:
            raise GraphContractError(f"Edge ({a}, {b}) does not exist.")
        _swap_remove(self._adj[a], b)
        _swap_remove(self._adj[b], a)

    def has_edge(self, a: VertexID, b: VertexID) -> bool:
        self.check_vertex(a)
        self.check_vertex(b)
        return b in self._adj[a]

    def neighbors(self, vertex: VertexID) -> List[VertexID]:
        """Return the live neighbor list of ``vertex``.

        The list is the graph's own storage; copy it before mutating the graph
        while iterating.
        """
        self.check_vertex(vertex)
        return self._adj[vertex]

    def degree(self, vertex: VertexID) -> int:
        self.check_vertex(vertex)
        return len(self._adj[vertex])

    def pop_edges(self, vertex: VertexID) -> List[VertexID]:
        """Detach ``vertex`` from all its neighbors.

        Returns:
            The removed neighbors, to be passed back to ``restore_edges``.
        """
        self.check_vertex(vertex)
        neighbors = self._adj[vertex]
        self._adj[vertex] = []
        for neighbor in neighbors:
            _swap_remove(self._adj[neighbor], vertex)
        return neighbors

    def restore_edges(self, vertex: VertexID, neighbors: Sequence[VertexID]) -> None:
        """Re-add an edge between ``vertex`` and each id in ``neighbors``.

        Undoes ``pop_edges``:

            neighbors = graph.pop_edges(v)
            ...
            graph.restore_edges(v, neighbors)
        """
        self.check_vertex(vertex)
        for neighbor in neighbors:
            self.check_vertex(neighbor)
            self._adj[vertex].append(neighbor)
            self._adj[neighbor].append(vertex)

    #
    # Inspection
    #
    def edges(self) -> Iterator[Edge]:
        """Yield every undirected edge once as ``(a, b)`` with ``a < b``."""
        for a, neighbors in enumerate(self._adj):
            for b in neighbors:
                if a < b:
                    yield a, b

    def edge_count(self) -> int:
        return sum(len(neighbors) for neighbors in self._adj) // 2

    def edge_multiset(self) -> Counter:
        """Return a Counter of normalized ``(a, b)`` pairs, parallel edges included."""
        return Counter(self.edges())


def _is_int(value: object) -> bool:
    # bool is an int subclass but never a vertex id or count
    return isinstance(value, int) and not isinstance(value, bool)


def _swap_remove(values: List[VertexID], value: VertexID) -> None:
    idx = values.index(value)
    values[idx] = values[-1]
    values.pop()


class EdgeEditLog:
    """Undo log of temporary edge removals on a graph.

    Each edit is applied immediately and recorded. ``undo()`` replays the
    records in reverse and empties the log, leaving the graph with the edge
    multiset it had before the first edit.
    """

    def __init__(self, graph: Graph) -> None:
        self.graph = graph
        self._removed_edges: List[Edge] = []
        self._popped: List[Tuple[VertexID, List[VertexID]]] = []

    def __len__(self) -> int:
        return len(self._removed_edges) + len(self._popped)

    def remove_edge(self, a: VertexID, b: VertexID) -> bool:
        """Remove edge ``(a, b)`` if present and record it.

        Returns:
            True if an edge was removed.
        """
        if not self.graph.has_edge(a, b):
            return False
        self.graph.remove_edge(a, b)
        self._removed_edges.append((a, b))
        return True

    def pop_edges(self, vertex: VertexID) -> List[VertexID]:
        """Detach ``vertex`` and record its former neighbors."""
        neighbors = self.graph.pop_edges(vertex)
        self._popped.append((vertex, neighbors))
        return neighbors

    def undo(self) -> None:
        while self._popped:
            vertex, neighbors = self._popped.pop()
            self.graph.restore_edges(vertex, neighbors)
        while self._removed_edges:
            a, b = self._removed_edges.pop()
            self.graph.restore_edges(a, [b])


@contextmanager
def graph_edits(graph: Graph) -> Iterator[EdgeEditLog]:
    """Yield an EdgeEditLog whose edits are undone when the block exits.

    The undo runs on normal exit, early return and exceptions alike.
    """
    log = EdgeEditLog(graph)
    try:
        yield log
    finally:
        log.undo()
