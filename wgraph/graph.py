from __future__ import annotations

import math
from numbers import Real
from typing import Any, Dict, Iterator, List, Optional, Tuple

from wgraph.config import GRAPH_CONFIG, GraphConfig
from wgraph.logging import get_logger
from wgraph.vertex import Vertex

logger = get_logger(__name__)

EdgeTuple = Tuple[Vertex, Vertex, float]


class UnknownVertexError(KeyError):
    """Raised when an operation references a vertex not registered in the graph."""


class DuplicateVertexError(ValueError):
    """Raised when a vertex is registered twice under strict configuration."""


class InvalidWeightError(ValueError):
    """Raised for edge weights that are negative, NaN, infinite or not numbers."""


def validate_weight(weight: Any) -> float:
    """
    Check that weight is a finite, non-negative real number.

    Args:
        weight: Candidate edge weight.

    Returns:
        The weight as a float.

    Raises:
        InvalidWeightError: If the weight is unusable as a shortest-path cost.
    """
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise InvalidWeightError(f"Edge weight must be a real number, got {weight!r}.")
    weight = float(weight)
    if math.isnan(weight) or math.isinf(weight):
        raise InvalidWeightError(f"Edge weight must be finite, got {weight!r}.")
    if weight < 0:
        raise InvalidWeightError(f"Edge weight must be non-negative, got {weight!r}.")
    return weight


class WeightedGraph:
    """
    An undirected weighted graph over Vertex objects.

    This class enforces:
      - No automatic registration of vertices when adding an edge.
      - Edge weights are finite and non-negative.
      - Re-adding a registered vertex never resets its neighbor list.

    Each edge is stored twice: in both endpoints' adjacency mappings (used by
    the search strategies) and in both endpoints' neighbor lists kept by the
    graph (used for neighbor enumeration).
    """

    def __init__(self, config: Optional[GraphConfig] = None) -> None:
        """
        Initialize an empty graph.

        Args:
            config: Validation rules. Defaults to the global GRAPH_CONFIG.
        """
        self.config = config if config is not None else GRAPH_CONFIG
        self._adjacency_map: Dict[Vertex, List[Vertex]] = {}

    #
    # Vertex management
    #
    def add_vertex(self, vertex: Vertex) -> Vertex:
        """
        Register a vertex with an empty neighbor list.

        Registering the same vertex again is a no-op unless the graph config
        sets strict_vertices.

        Args:
            vertex: The vertex to add.

        Returns:
            The registered vertex.

        Raises:
            DuplicateVertexError: If the vertex exists and strict_vertices is set.
        """
        if vertex in self._adjacency_map:
            if self.config.strict_vertices:
                raise DuplicateVertexError(f"{vertex!r} already exists in this graph.")
            logger.debug("Ignoring repeated registration of %r", vertex)
            return vertex
        self._adjacency_map[vertex] = []
        logger.debug("Added %r", vertex)
        return vertex

    def vertices(self) -> List[Vertex]:
        """Return all registered vertices in registration order."""
        return list(self._adjacency_map)

    def find_vertex(self, payload: Any) -> Optional[Vertex]:
        """
        Return the first registered vertex carrying payload, or None.

        Payload lookup is a convenience for callers holding plain values;
        vertices themselves stay identity-keyed.
        """
        for vertex in self._adjacency_map:
            if vertex.payload == payload:
                return vertex
        return None

    #
    # Edge management
    #
    def add_edge(self, source: Vertex, destination: Vertex, weight: float) -> None:
        """
        Add an undirected edge between two registered vertices.

        The edge is materialized in both endpoints: each vertex records the
        other as adjacent with the same weight, and each neighbor list gains
        the opposite endpoint. Adding an edge that already exists overwrites
        its weight. Nothing is modified if validation fails.

        Args:
            source: One endpoint. Must be registered.
            destination: The other endpoint. Must be registered.
            weight: Finite, non-negative edge weight.

        Raises:
            UnknownVertexError: If either endpoint is not registered.
            InvalidWeightError: If the weight is invalid.
            ValueError: If the endpoints coincide and self-loops are disabled.
        """
        if source not in self._adjacency_map:
            raise UnknownVertexError(f"Source {source!r} is not in the graph.")
        if destination not in self._adjacency_map:
            raise UnknownVertexError(f"Destination {destination!r} is not in the graph.")
        weight = validate_weight(weight)
        if source is destination and not self.config.allow_self_loops:
            raise ValueError(f"Self-loop on {source!r} is not allowed.")

        # A repeated edge only updates the weight
        is_new = destination not in source.adjacents
        source.add_adjacent(destination, weight)
        destination.add_adjacent(source, weight)
        if is_new:
            self._adjacency_map[source].append(destination)
            if source is not destination:
                self._adjacency_map[destination].append(source)
        logger.debug("Added edge %r <-> %r (weight=%s)", source, destination, weight)

    def neighbors(self, vertex: Vertex) -> List[Vertex]:
        """
        Return the list of neighbors of a vertex.

        Raises:
            UnknownVertexError: If the vertex is not registered.
        """
        try:
            return self._adjacency_map[vertex]
        except KeyError:
            raise UnknownVertexError(f"{vertex!r} is not in the graph.") from None

    def weight(self, source: Vertex, destination: Vertex) -> float:
        """
        Return the weight of the edge between two vertices.

        Raises:
            UnknownVertexError: If source is unregistered.
            KeyError: If the vertices are not adjacent.
        """
        if source not in self._adjacency_map:
            raise UnknownVertexError(f"{source!r} is not in the graph.")
        try:
            return source.adjacents[destination]
        except KeyError:
            raise KeyError(f"No edge between {source!r} and {destination!r}.") from None

    def edges(self) -> Iterator[EdgeTuple]:
        """
        Yield each undirected edge once as (vertex, vertex, weight).

        Edges are reported from the endpoint registered first.
        """
        seen = set()
        for vertex in self._adjacency_map:
            for neighbor, weight in vertex.adjacents.items():
                if neighbor in seen:
                    continue
                yield vertex, neighbor, weight
            seen.add(vertex)

    def num_edges(self) -> int:
        """Return the number of distinct undirected edges."""
        return sum(1 for _ in self.edges())

    @property
    def adjacency_map(self) -> Dict[Vertex, List[Vertex]]:
        """The vertex -> neighbor-list mapping kept by the graph."""
        return self._adjacency_map

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency_map

    def __len__(self) -> int:
        return len(self._adjacency_map)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._adjacency_map)

    def __repr__(self) -> str:
        return f"WeightedGraph(vertices={len(self)}, edges={self.num_edges()})"
