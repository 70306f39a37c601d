"""NetworkX graph conversion utilities.

Example:
    >>> import networkx as nx
    >>> from wgraph.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.Graph()
    >>> G.add_edge("A", "B", weight=2.0)
    >>> graph, vertex_map = from_networkx(G)
    >>> to_networkx(graph).edges["A", "B"]["weight"]
    2.0
"""

from __future__ import annotations

from typing import Any, Optional, Tuple

import networkx as nx

from wgraph.config import GraphConfig
from wgraph.graph import WeightedGraph, validate_weight
from wgraph.io import VertexMap
from wgraph.vertex import Vertex


def to_networkx(graph: WeightedGraph, weight_attr: str = "weight") -> nx.Graph:
    """
    Convert a WeightedGraph to an undirected NetworkX graph.

    Nodes are the vertex payloads, so payloads must be hashable and distinct.

    Args:
        graph: The graph to convert.
        weight_attr: Edge attribute that receives the weight.

    Returns:
        networkx.Graph with one node per vertex and one edge per undirected edge.

    Raises:
        ValueError: If two vertices carry the same payload.
    """
    G = nx.Graph()
    for vertex in graph.vertices():
        if vertex.payload in G:
            raise ValueError(
                f"Duplicate payload {vertex.payload!r}; NetworkX nodes must be unique"
            )
        G.add_node(vertex.payload)
    for source, target, weight in graph.edges():
        G.add_edge(source.payload, target.payload, **{weight_attr: weight})
    return G


def from_networkx(
    G: Any,
    *,
    weight_attr: str = "weight",
    default_weight: float = 1.0,
    config: Optional[GraphConfig] = None,
) -> Tuple[WeightedGraph, VertexMap]:
    """
    Convert an undirected NetworkX graph to a WeightedGraph.

    For multigraphs, parallel edges collapse to the lowest weight.

    Args:
        G: networkx.Graph or networkx.MultiGraph.
        weight_attr: Edge attribute holding the weight.
        default_weight: Weight used when the attribute is missing.
        config: Graph configuration passed to the new graph.

    Returns:
        (graph, vertex_map) where vertex_map maps node -> Vertex.

    Raises:
        TypeError: If G is not an undirected NetworkX graph.
        InvalidWeightError: If an edge weight is negative, NaN, infinite or
            not a number.
    """
    if not isinstance(G, (nx.Graph, nx.MultiGraph)) or G.is_directed():
        raise TypeError(
            f"Expected undirected NetworkX graph (Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    graph = WeightedGraph(config)
    vertex_map: VertexMap = {}
    for node in G.nodes():
        vertex_map[node] = graph.add_vertex(Vertex(node))

    for u, v, data in G.edges(data=True):
        weight = validate_weight(data.get(weight_attr, default_weight))
        source, target = vertex_map[u], vertex_map[v]
        existing = source.adjacents.get(target)
        if existing is not None and existing <= weight:
            continue
        graph.add_edge(source, target, weight)
    return graph, vertex_map
