from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Dict, List, Optional, Set, Tuple

from wgraph.algorithms.base import Path, Search, VertexPath
from wgraph.algorithms.path_utils import reconstruct_path
from wgraph.graph import InvalidWeightError
from wgraph.logging import get_logger
from wgraph.vertex import Vertex

logger = get_logger(__name__)

#: Frontier entry: (tentative distance, insertion sequence, vertex).
FrontierEntry = Tuple[float, int, Vertex]


class DijkstraSearch(Search):
    """
    Dijkstra's shortest path search over non-negative edge weights.

    The frontier is a binary heap with lazy deletion: a relaxed vertex is
    pushed again with its new distance, and entries popped for vertices that
    are already finalized are skipped. Among entries with equal distance the
    one pushed first is popped first.
    """

    def _search(
        self, source: Vertex, destination: Vertex
    ) -> Optional[Tuple[VertexPath, float]]:
        """
        Run the search and return (vertex path, total weight), or None.

        Raises:
            InvalidWeightError: If a negative edge weight is reached.
        """
        distance: Dict[Vertex, float] = {source: 0.0}
        parent: Dict[Vertex, Vertex] = {}
        visited: Set[Vertex] = set()
        sequence = count()
        frontier: List[FrontierEntry] = [(0.0, next(sequence), source)]

        while frontier:
            current_distance, _, current = heappop(frontier)
            if current in visited:
                # Stale entry superseded by a shorter distance
                continue
            visited.add(current)

            if current is destination:
                path = reconstruct_path(parent, destination)
                logger.debug(
                    "Dijkstra found %r -> %r with cost %s",
                    source,
                    destination,
                    current_distance,
                )
                return path, current_distance

            for neighbor, weight in current.adjacents.items():
                if weight < 0:
                    raise InvalidWeightError(
                        f"Negative weight {weight!r} on edge {current!r} -> {neighbor!r}."
                    )
                if neighbor in visited:
                    continue
                new_distance = current_distance + weight
                if neighbor not in distance or new_distance < distance[neighbor]:
                    distance[neighbor] = new_distance
                    parent[neighbor] = current
                    heappush(frontier, (new_distance, next(sequence), neighbor))

        logger.debug("Dijkstra found no path %r -> %r", source, destination)
        return None

    def find_vertex_path(
        self, source: Vertex, destination: Vertex
    ) -> Optional[VertexPath]:
        result = self._search(source, destination)
        return None if result is None else result[0]

    def find_path_with_cost(
        self, source: Vertex, destination: Vertex
    ) -> Optional[Tuple[Path, float]]:
        """
        Find the cheapest path and its total weight.

        Returns:
            (payload path, total weight), or None if no path exists.
        """
        result = self._search(source, destination)
        if result is None:
            return None
        vertices, cost = result
        return [vertex.payload for vertex in vertices], cost

    def shortest_distance(self, source: Vertex, destination: Vertex) -> Optional[float]:
        """Return the minimum total weight from source to destination, or None."""
        result = self._search(source, destination)
        return None if result is None else result[1]
