"""Length-targeted path search built on Yen's k-shortest loopless paths.

`ksp` enumerates loopless paths in non-decreasing vertex count. For every
vertex (spur node) of the last accepted path it temporarily removes the edges
that previously accepted paths use to leave the same root prefix, detaches the
root prefix vertices, and runs BFS from the spur node. Root prefix plus spur
path becomes a candidate; the shortest candidate is accepted next.

`yen` consumes that enumeration and stops at the first path whose vertex count
equals the target, or as soon as accepted paths grow past it.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from fixpath.algorithms.bfs import shortest_path
from fixpath.algorithms.paths import Path, check_target_length
from fixpath.config import SEARCH_CONFIG, SearchConfig
from fixpath.graph import Graph, VertexID, graph_edits
from fixpath.logging import get_logger, search_log_level

logger = get_logger(__name__)


def ksp(
    graph: Graph,
    start: VertexID,
    end: VertexID,
    max_k: Optional[int] = None,
) -> Iterator[Path]:
    """Yield loopless ``start -> end`` paths in non-decreasing vertex count.

    The graph is edited while candidates are computed and restored before each
    path is yielded, so the caller may stop iterating at any point.

    Among candidates of equal length the one discovered first wins.

    Args:
        graph: The undirected graph. Mutated transiently, restored on exit.
        start: Source vertex.
        end: Destination vertex.
        max_k: If set, yield at most this many paths.

    Yields:
        Paths as lists of vertex ids.
    """
    graph.check_vertex(start)
    graph.check_vertex(end)
    if max_k is not None and max_k <= 0:
        return

    first = shortest_path(graph, start, end)
    if first is None:
        return

    accepted: List[Path] = [first]
    yield first

    candidates: List[Path] = []

    while max_k is None or len(accepted) < max_k:
        previous = accepted[-1]
        # The last vertex of a path is ``end`` itself and has nothing to spur.
        for idx in range(len(previous) - 1):
            spur_node = previous[idx]
            root_path = previous[:idx]

            with graph_edits(graph) as edits:
                # Force a different continuation than every accepted path that
                # shares this root prefix and spur node.
                for path in accepted:
                    if len(path) > idx + 1 and path[: idx + 1] == previous[: idx + 1]:
                        edits.remove_edge(path[idx], path[idx + 1])

                for vertex in root_path:
                    edits.pop_edges(vertex)

                spur_path = shortest_path(graph, spur_node, end)

            if spur_path is None:
                continue

            candidate = root_path + spur_path
            if candidate not in candidates:
                candidates.append(candidate)

        if not candidates:
            return

        # min() keeps the earliest of equally short candidates.
        best = min(candidates, key=len)
        candidates.remove(best)
        accepted.append(best)
        yield best


def yen(
    graph: Graph,
    start: VertexID,
    end: VertexID,
    length: int,
    config: Optional[SearchConfig] = None,
) -> Optional[Path]:
    """Search for a loopless ``start -> end`` path with exactly ``length`` vertices.

    Paths are enumerated shortest first, so the search gives up once the
    accepted paths are longer than ``length``.

    Args:
        graph: The undirected graph. Edited during the call and restored to
            the same edge multiset before returning.
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
    if length > graph.size:
        logger.log(level, "No path of %d vertices in a graph of %d", length, graph.size)
        return None

    max_k = config.yen_iteration_limit(graph.size, length)
    for k, path in enumerate(ksp(graph, start, end, max_k=max_k)):
        logger.log(level, "Yen accepted path %d with %d vertices", k, len(path))
        if len(path) == length:
            return path
        if len(path) > length:
            return None

    logger.log(
        level, "Yen found no path of %d vertices from %d to %d", length, start, end
    )
    return None
