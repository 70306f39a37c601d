from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any, List, Optional

from wgraph.vertex import Vertex

#: A path is the list of payloads from the source to the destination, inclusive.
Path = List[Any]

#: The same path expressed as the traversed vertex objects.
VertexPath = List[Vertex]


class SearchAlg(IntEnum):
    """
    Types of path finding algorithms
    """

    #: Fewest edges; weights are ignored.
    BFS = 1
    #: Smallest total weight; weights must be non-negative.
    DIJKSTRA = 2


class Search(ABC):
    """
    Find a path between two vertices of a graph.

    Strategies keep no per-call state, so one instance can serve any number of
    searches. A missing path is reported as None, not as an exception.
    """

    @abstractmethod
    def find_vertex_path(
        self, source: Vertex, destination: Vertex
    ) -> Optional[VertexPath]:
        """
        Find a path and return the traversed vertices.

        Args:
            source: The vertex to start from.
            destination: The vertex to reach.

        Returns:
            Vertices from source to destination inclusive, or None if the
            destination is unreachable.
        """
        raise NotImplementedError

    def find_path(self, source: Vertex, destination: Vertex) -> Optional[Path]:
        """
        Find a path from source to destination.

        Args:
            source: The vertex to start from.
            destination: The vertex to reach.

        Returns:
            Payloads of the vertices on the path, source first, or None if no
            path exists. find_path(v, v) returns [v.payload].
        """
        vertices = self.find_vertex_path(source, destination)
        if vertices is None:
            return None
        return [vertex.payload for vertex in vertices]
