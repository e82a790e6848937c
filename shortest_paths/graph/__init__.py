"""Graph module: vertex/edge types, adjacency storage and traversal.

This module provides the directed weighted graph that the shortest-path
algorithms operate on, together with depth-first search and topological
sorting over it.
"""

from shortest_paths.graph.adjacency import AdjacencyList
from shortest_paths.graph.elements import Edge, Vertex, VertexColor
from shortest_paths.graph.errors import (
    CycleDetectedError,
    DuplicateVertexError,
    GraphError,
    InvalidEndpointError,
    InvalidIdentifierError,
    VertexNotFoundError,
)
from shortest_paths.graph.traversal import DFSState, depth_first_search, topological_sort
from shortest_paths.graph.weighted_graph import WeightedGraph

__all__ = [
    "AdjacencyList",
    "CycleDetectedError",
    "DFSState",
    "DuplicateVertexError",
    "Edge",
    "GraphError",
    "InvalidEndpointError",
    "InvalidIdentifierError",
    "Vertex",
    "VertexColor",
    "VertexNotFoundError",
    "WeightedGraph",
    "depth_first_search",
    "topological_sort",
]
