"""Configuration classes for fixpath searches."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SearchConfig:
    """Tuning knobs shared by the path searches."""

    # Exact-length search pushes accepted vertices to the front of its queue.
    # Front insertion reaches deep chains sooner on long targets; back
    # insertion gives plain FIFO order.
    push_front: bool = True

    # Optional cap on the number of paths Yen may accept, on top of the
    # vertex-count bound.
    max_yen_paths: Optional[int] = None

    # Emit search outcome records at INFO instead of DEBUG.
    trace: bool = False

    def yen_iteration_limit(self, vertex_count: int, target_length: int) -> int:
        """Return how many paths Yen may accept, seed path included.

        A simple path never has more vertices than the graph, so Yen stops
        after ``vertex_count - target_length`` iterations past the seed.
        """
        limit = max(0, vertex_count - target_length + 1)
        if self.max_yen_paths is not None:
            limit = min(limit, self.max_yen_paths)
        return limit


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
