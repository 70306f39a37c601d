"""wgraph: path search over undirected weighted graphs.

Provides breadth-first search (fewest edges) and Dijkstra search (smallest
total weight) over a small vertex/graph model.

Primary API:
    Vertex, WeightedGraph - Graph model
    BreadthFirstSearch, DijkstraSearch - Search strategies
    search_fabric() - Build a strategy by algorithm name
    load_graph_yaml(), graph_from_dict() - Build graphs from documents
    from_networkx(), to_networkx() - NetworkX conversion

Example:
    from wgraph import Vertex, WeightedGraph, DijkstraSearch

    graph = WeightedGraph()
    a = graph.add_vertex(Vertex("A"))
    b = graph.add_vertex(Vertex("B"))
    graph.add_edge(a, b, 2.0)

    DijkstraSearch().find_path(a, b)  # ["A", "B"]
"""

from __future__ import annotations

from wgraph import cli, logging
from wgraph._version import __version__
from wgraph.algorithms import (
    BreadthFirstSearch,
    DijkstraSearch,
    Search,
    SearchAlg,
    path_weight,
    reconstruct_path,
    search_fabric,
)
from wgraph.config import GRAPH_CONFIG, GraphConfig
from wgraph.graph import (
    DuplicateVertexError,
    InvalidWeightError,
    UnknownVertexError,
    WeightedGraph,
)
from wgraph.io import graph_from_dict, load_graph_yaml
from wgraph.nx import from_networkx, to_networkx
from wgraph.vertex import Vertex

__all__ = [
    # Version
    "__version__",
    # Model
    "Vertex",
    "WeightedGraph",
    # Search
    "Search",
    "SearchAlg",
    "BreadthFirstSearch",
    "DijkstraSearch",
    "search_fabric",
    "reconstruct_path",
    "path_weight",
    # Errors
    "UnknownVertexError",
    "InvalidWeightError",
    "DuplicateVertexError",
    # Configuration
    "GraphConfig",
    "GRAPH_CONFIG",
    # Documents and integrations
    "graph_from_dict",
    "load_graph_yaml",
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
