"""Configuration classes for wgraph components."""

from dataclasses import dataclass


@dataclass
class GraphConfig:
    """Validation rules applied by WeightedGraph on mutation."""

    # Raise on a second add_vertex() of the same vertex instead of ignoring it
    strict_vertices: bool = False

    # Accept edges whose two endpoints are the same vertex
    allow_self_loops: bool = True


# Global configuration instance
GRAPH_CONFIG = GraphConfig()
