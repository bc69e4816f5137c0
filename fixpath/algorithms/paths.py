"""Helpers shared by the path searches: reconstruction and validation."""

from __future__ import annotations

from typing import List, Optional, Sequence

from fixpath.exceptions import GraphContractError
from fixpath.graph import Graph, VertexID

# Predecessor entry of a vertex with no predecessor (the BFS root or an
# unreached vertex).
NO_PREDECESSOR = -1

Path = List[VertexID]


def walk_predecessors(
    predecessor: Sequence[VertexID], vertex: VertexID
) -> Path:
    """Return the predecessor chain from the BFS root to ``vertex``.

    Args:
        predecessor: Predecessor list indexed by vertex id.
        vertex: The vertex whose chain is wanted.

    Returns:
        ``[root, ..., vertex]``.
    """
    path = [vertex]
    current = vertex
    while predecessor[current] != NO_PREDECESSOR:
        current = predecessor[current]
        path.append(current)
    path.reverse()
    return path


def check_target_length(length: int) -> None:
    """Raise GraphContractError unless ``length`` is a positive vertex count."""
    if not isinstance(length, int) or isinstance(length, bool) or length < 1:
        raise GraphContractError(f"Target length must be an int >= 1, got {length!r}.")


def is_simple_path(
    graph: Graph,
    path: Optional[Sequence[VertexID]],
    start: VertexID,
    end: VertexID,
    length: Optional[int] = None,
) -> bool:
    """Check that ``path`` is a simple start->end path in ``graph``.

    Args:
        graph: Graph the path should follow.
        path: Candidate path (``None`` is never valid).
        start: Expected first vertex.
        end: Expected last vertex.
        length: If given, the expected vertex count.

    Returns:
        True if every consecutive pair is an edge, no vertex repeats and the
        endpoints (and length, if given) match.
    """
    if not path:
        return False
    if length is not None and len(path) != length:
        return False
    if path[0] != start or path[-1] != end:
        return False
    if any(vertex not in graph for vertex in path):
        return False
    if len(set(path)) != len(path):
        return False
    return all(graph.has_edge(a, b) for a, b in zip(path, path[1:]))
