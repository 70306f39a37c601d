"""Build graphs from plain mappings and YAML documents.

A graph document lists optional standalone vertices and the undirected edges
between them::

    vertices: [donkey, sheep, cow, horse]
    edges:
      - [donkey, sheep, 9]
      - {source: sheep, target: cow, weight: 3}

Vertices named only in edges are registered implicitly. Payloads are
normalized to strings, so YAML 1.1 booleans (true, yes, on, ...) and numbers
stay distinct from each other: `1`, `1.0` and `true` become the three payloads
"1", "1.0" and "True". Each distinct payload becomes one Vertex.
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, Optional, Tuple

import yaml

from wgraph.config import GraphConfig
from wgraph.graph import WeightedGraph
from wgraph.logging import get_logger
from wgraph.vertex import Vertex

logger = get_logger(__name__)

#: Maps each payload to the vertex created for it.
VertexMap = Dict[Hashable, Vertex]

_ALLOWED_KEYS = {"vertices", "edges"}


def normalize_payload(payload: Any) -> str:
    """Return the string form of a vertex payload read from a document.

    Booleans parsed from YAML 1.1 literals become "True"/"False"; everything
    else goes through str(). Numbers and booleans therefore never collide on
    dict equality (1 == True == 1.0 in Python).

    Raises:
        ValueError: If the payload is null, a list or a mapping.
    """
    if payload is None or not isinstance(payload, Hashable):
        raise ValueError(
            f"Vertex payload must be a hashable scalar, got {payload!r}"
        )
    return str(payload)


def _parse_edge(entry: Any) -> Tuple[Hashable, Hashable, Any]:
    if isinstance(entry, dict):
        if "source" not in entry or "target" not in entry:
            raise ValueError("Each edge mapping must include 'source' and 'target'")
        return entry["source"], entry["target"], entry.get("weight", 1.0)
    if isinstance(entry, (list, tuple)) and len(entry) in (2, 3):
        weight = entry[2] if len(entry) == 3 else 1.0
        return entry[0], entry[1], weight
    raise ValueError(
        f"Edge must be [source, target, weight] or a mapping, got {entry!r}"
    )


def graph_from_dict(
    data: Dict[str, Any], config: Optional[GraphConfig] = None
) -> Tuple[WeightedGraph, VertexMap]:
    """
    Build a WeightedGraph from a vertices/edges mapping.

    Args:
        data: Mapping with optional 'vertices' (list of payloads) and 'edges'
            (list of [source, target, weight] or source/target/weight mappings;
            weight defaults to 1).
        config: Graph configuration passed to the new graph.

    Returns:
        (graph, vertex_map) where vertex_map maps the normalized string
        payload -> Vertex.

    Raises:
        ValueError: If the document shape is invalid or a payload is null,
            a list or a mapping.
        InvalidWeightError: If an edge weight is invalid.
    """
    if not isinstance(data, dict):
        raise ValueError("Graph document must be a mapping at top-level.")
    unknown = set(data) - _ALLOWED_KEYS
    if unknown:
        raise ValueError(f"Unrecognized top-level key(s): {sorted(map(str, unknown))}")

    vertices = data.get("vertices")
    edges = data.get("edges")
    if vertices is None:
        vertices = []
    if edges is None:
        edges = []
    if not isinstance(vertices, list):
        raise ValueError("'vertices' must be a list")
    if not isinstance(edges, list):
        raise ValueError("'edges' must be a list")

    graph = WeightedGraph(config)
    vertex_map: VertexMap = {}

    def vertex_for(raw: Any) -> Vertex:
        payload = normalize_payload(raw)
        if payload not in vertex_map:
            vertex_map[payload] = graph.add_vertex(Vertex(payload))
        return vertex_map[payload]

    for payload in vertices:
        vertex_for(payload)
    for entry in edges:
        source, target, weight = _parse_edge(entry)
        graph.add_edge(vertex_for(source), vertex_for(target), weight)

    logger.debug(
        "Built graph: vertices=%d, edges=%d", len(graph), graph.num_edges()
    )
    return graph, vertex_map


def load_graph_yaml(
    yaml_str: str, config: Optional[GraphConfig] = None
) -> Tuple[WeightedGraph, VertexMap]:
    """
    Build a WeightedGraph from a YAML document.

    An empty document yields an empty graph.

    Raises:
        ValueError: If the YAML does not map to a valid graph document.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    return graph_from_dict(data, config)
