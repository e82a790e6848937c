"""Plain-text rendering of solver results.

Produces the vertex table (id, distance, predecessor) and edge table the CLI
prints, and an ``on_relaxed`` observer that emits the vertex table after
every relaxation.
"""

import math
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from shortest_paths.graph.elements import Edge
    from shortest_paths.graph.weighted_graph import WeightedGraph

RULE = "-------------------"


def format_distance(value: float) -> str:
    """Format a distance for display.

    Example:
        >>> format_distance(7.0), format_distance(-2.5), format_distance(math.inf)
        ('7', '-2.5', 'inf')
    """
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == int(value):
        return str(int(value))
    return str(value)


def render_vertex_table(graph: "WeightedGraph", caption: str) -> str:
    """Render every vertex with its distance and predecessor.

    Args:
        graph: Graph to render, in vertex insertion order
        caption: Line printed above the table

    Returns:
        The table as a newline-joined string
    """
    lines = [caption, "  V  |  D  |  P  "]
    for vertex in graph.vertices:
        predecessor = vertex.predecessor_id if vertex.predecessor_id is not None else "-"
        lines.append(f"  {vertex.id}  |  {format_distance(vertex.distance)}  |  {predecessor}  ")
    lines.append(RULE)
    return "\n".join(lines)


def render_edge_table(graph: "WeightedGraph") -> str:
    """Render every edge with its weight, in enumeration order."""
    lines = ["  E  |  W  "]
    lines.extend(f"  {edge.id}  |  {edge.weight}  " for edge in graph.edges)
    lines.append(RULE)
    return "\n".join(lines)


class RelaxationTracer:
    """``on_relaxed`` observer that writes the vertex table after each relaxation.

    Attributes:
        graph: Graph being solved
        stream: Where tables are written
        count: Number of relaxations traced so far
    """

    def __init__(self, graph: "WeightedGraph", stream: TextIO):
        self.graph = graph
        self.stream = stream
        self.count = 0

    def __call__(self, edge: "Edge") -> None:
        self.count += 1
        caption = f"{edge.source.id} -> {edge.target.id}"
        print(render_vertex_table(self.graph, caption), file=self.stream)
