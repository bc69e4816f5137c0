"""Exact-length path search.

Finds a simple path with an exact vertex count between two vertices of an
undirected graph. The search runs in two phases:

1. A full BFS from ``start`` gives the start-side distance and predecessor of
   every vertex in the component.
2. A second search grows from ``end``. Every vertex keeps one accepted chain of
   vertices leading back to ``end``; a chain is replaced only by a longer one
   that still leaves room to reach ``start`` within the target. As soon as the
   start-side distance plus the end-side chain of some vertex adds up to the
   target, the two halves are joined.

Notes:
    Exact-length simple path is NP-complete in general. Each vertex keeps a
    single chain and never branches, so the search may return ``None`` even
    though a path of the requested length exists through a discarded chain.
"""

from __future__ import annotations

from collections import deque
from typing import List, Optional, Sequence

from fixpath.algorithms.bfs import UNREACHED, bfs
from fixpath.algorithms.paths import Path, check_target_length, walk_predecessors
from fixpath.config import SEARCH_CONFIG, SearchConfig
from fixpath.graph import Graph, VertexID
from fixpath.logging import get_logger, search_log_level

logger = get_logger(__name__)

Chain = List[VertexID]


def fixed_length_search(
    graph: Graph,
    start: VertexID,
    end: VertexID,
    length: int,
    config: Optional[SearchConfig] = None,
) -> Optional[Path]:
    """Search for a simple ``start -> end`` path with exactly ``length`` vertices.

    The graph is only read, never mutated.

    Args:
        graph: The undirected graph.
        start: First vertex of the path.
        end: Last vertex of the path.
        length: Required number of vertices, at least 1.
        config: Search tuning; defaults to ``SEARCH_CONFIG``.

    Returns:
        The path as a list of vertex ids, or None if none was found.

    Raises:
        GraphContractError: If a vertex id is out of range or ``length < 1``.
    """
    graph.check_vertex(start)
    graph.check_vertex(end)
    check_target_length(length)
    if config is None:
        config = SEARCH_CONFIG
    level = search_log_level(config.trace)

    if start == end:
        return [start] if length == 1 else None

    target_edges = length - 1

    distance, predecessor = bfs(graph, start)
    if distance[end] == UNREACHED or distance[end] > target_edges:
        logger.log(
            level,
            "No path of %d vertices from %d to %d: shortest distance is %s",
            length,
            start,
            end,
            "unreachable" if distance[end] == UNREACHED else distance[end],
        )
        return None

    # chain[v] holds the vertices from ``end`` up to, but excluding, v.
    chain: List[Optional[Chain]] = [None] * graph.size
    chain[end] = []
    queue = deque([end])

    while queue:
        current = queue.popleft()
        current_chain = chain[current]
        for neighbor in graph.neighbors(current):
            if not _accepts(
                neighbor, current, current_chain, chain, distance, predecessor, target_edges
            ):
                continue

            neighbor_chain = current_chain + [current]
            chain[neighbor] = neighbor_chain

            if distance[neighbor] + len(neighbor_chain) == target_edges:
                path = walk_predecessors(predecessor, neighbor)
                path.extend(reversed(neighbor_chain))
                logger.log(
                    level, "Found path of %d vertices from %d to %d", length, start, end
                )
                return path

            if config.push_front:
                queue.appendleft(neighbor)
            else:
                queue.append(neighbor)

    logger.log(
        level, "Exhausted search for %d-vertex path from %d to %d", length, start, end
    )
    return None


def _accepts(
    neighbor: VertexID,
    current: VertexID,
    current_chain: Chain,
    chain: Sequence[Optional[Chain]],
    distance: Sequence[int],
    predecessor: Sequence[VertexID],
    target_edges: int,
) -> bool:
    """Return True if ``neighbor`` may take ``current_chain + [current]`` as its chain."""
    neighbor_chain = chain[neighbor]
    if neighbor_chain is not None:
        if len(current_chain) + 1 <= len(neighbor_chain):
            return False
        if len(current_chain) + distance[neighbor] >= target_edges:
            return False

    if neighbor in current_chain:
        return False

    # The joined path is start_side + reversed(chain); the halves must not share
    # a vertex.
    start_side = set(walk_predecessors(predecessor, neighbor))
    if current in start_side:
        return False
    return not any(vertex in start_side for vertex in current_chain)
