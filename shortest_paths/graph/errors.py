"""Exceptions raised by the graph store and traversal functions.

All of these signal misuse of the API and propagate to the caller. A negative
cycle found by Bellman-Ford is not an error and has no exception here.
"""


class GraphError(Exception):
    """Base class for graph errors."""

    def __init__(self, message: str):
        """Initialize the exception with a descriptive message.

        Args:
            message: Description of the error
        """
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        # KeyError subclasses would otherwise repr() the message
        return self.message


class InvalidIdentifierError(GraphError, ValueError):
    """Raised when a vertex is created with a missing or empty identifier."""


class DuplicateVertexError(GraphError, ValueError):
    """Raised when a vertex id is added to a graph that already holds it."""

    def __init__(self, vertex_id: str):
        super().__init__(f"Vertex [{vertex_id}] already exists")
        self.vertex_id = vertex_id


class VertexNotFoundError(GraphError, KeyError):
    """Raised when an operation references a vertex id absent from the graph."""

    def __init__(self, vertex_id: str | None, role: str = "vertex"):
        """Initialize the exception for a missing vertex.

        Args:
            vertex_id: The identifier that could not be resolved
            role: Which argument referenced it (e.g. "source", "target")
        """
        super().__init__(f"{role.capitalize()} [{vertex_id}] not found")
        self.vertex_id = vertex_id
        self.role = role


class InvalidEndpointError(GraphError, ValueError):
    """Raised when an edge is constructed without a source or target vertex."""


class CycleDetectedError(GraphError):
    """Raised when a topological order is requested for a graph with a cycle.

    Only raised when the caller asks for the acyclic precondition to be
    verified; by default the topological sort trusts its input.
    """


__all__ = [
    "CycleDetectedError",
    "DuplicateVertexError",
    "GraphError",
    "InvalidEndpointError",
    "InvalidIdentifierError",
    "VertexNotFoundError",
]
