from __future__ import annotations

from typing import Any, Dict


class Vertex:
    """
    A graph node carrying a payload and its weighted adjacency.

    Vertices compare and hash by identity: two vertices holding equal payloads
    are distinct unless they are the same object. This lets them key the
    visited sets and parent maps used by the search strategies.

    Attributes:
        payload: The value carried by the vertex.
        adjacents: Maps each adjacent vertex to the weight of the connecting
            edge, in insertion order.
    """

    __slots__ = ("_payload", "_adjacents")

    def __init__(self, payload: Any) -> None:
        self._payload = payload
        self._adjacents: Dict[Vertex, float] = {}

    @property
    def payload(self) -> Any:
        return self._payload

    @property
    def adjacents(self) -> Dict[Vertex, float]:
        return self._adjacents

    def add_adjacent(self, neighbor: Vertex, weight: float) -> None:
        """
        Insert or overwrite the edge weight towards neighbor.

        The weight is stored as given. WeightedGraph.add_edge() is the
        validating entry point and keeps both endpoints symmetric.

        Args:
            neighbor: The adjacent vertex.
            weight: Weight of the edge connecting this vertex to neighbor.
        """
        self._adjacents[neighbor] = weight

    def __repr__(self) -> str:
        return f"Vertex({self._payload!r})"
