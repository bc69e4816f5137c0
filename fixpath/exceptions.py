"""Exceptions raised by fixpath.

A search that finds nothing returns ``None``. Exceptions are reserved for
misuse of the API, such as out-of-range vertex ids or removing an edge that
does not exist.
"""


class GraphContractError(ValueError):
    """Raised when a caller violates a graph or search precondition.

    Examples:
        * Vertex id outside ``[0, size)``
        * Target path length below 1
        * Removing an edge that is not in the graph
        * Adding a self-loop
    """

    def __str__(self) -> str:
        """Format contract violation message."""
        return f"Contract violation: {super().__str__()}"
