from collections import deque
from typing import List, Optional, Tuple

from fixpath.algorithms.paths import NO_PREDECESSOR, Path, walk_predecessors
from fixpath.graph import Graph, VertexID

# Distance entry of a vertex not reached by the BFS.
UNREACHED = -1


def bfs(graph: Graph, start: VertexID) -> Tuple[List[int], List[VertexID]]:
    """
    Breadth-first search over the whole component of ``start``.

    Returns:
        ``(distance, predecessor)`` lists indexed by vertex id. Unreached
        vertices have distance ``UNREACHED``; the root and unreached vertices
        have predecessor ``NO_PREDECESSOR``.
    """
    graph.check_vertex(start)
    distance = [UNREACHED] * graph.size
    predecessor = [NO_PREDECESSOR] * graph.size
    distance[start] = 0
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for neighbor in graph.neighbors(current):
            if distance[neighbor] == UNREACHED:
                distance[neighbor] = distance[current] + 1
                predecessor[neighbor] = current
                queue.append(neighbor)
    return distance, predecessor


def shortest_path(graph: Graph, start: VertexID, end: VertexID) -> Optional[Path]:
    """
    Shortest ``start -> end`` path by vertex count, or None if unreachable.

    FIFO BFS that stops as soon as ``end`` is discovered. Deterministic for a
    fixed neighbor ordering.
    """
    graph.check_vertex(start)
    graph.check_vertex(end)
    if start == end:
        return [start]

    predecessor = [NO_PREDECESSOR] * graph.size
    visited = [False] * graph.size
    visited[start] = True
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for neighbor in graph.neighbors(current):
            if not visited[neighbor]:
                visited[neighbor] = True
                predecessor[neighbor] = current
                if neighbor == end:
                    return walk_predecessors(predecessor, end)
                queue.append(neighbor)
    return None
