from __future__ import annotations

from collections import deque
from typing import Deque, Dict, Optional, Set

from wgraph.algorithms.base import Search, VertexPath
from wgraph.algorithms.path_utils import reconstruct_path
from wgraph.logging import get_logger
from wgraph.vertex import Vertex

logger = get_logger(__name__)


class BreadthFirstSearch(Search):
    """
    Breadth-first search for the path with the fewest edges.

    Edge weights are never consulted. Vertices are marked visited when they
    are enqueued, so a vertex reachable along several equally short paths is
    queued once and keeps the parent that discovered it first. Neighbors are
    explored in the insertion order of each vertex's adjacency mapping.
    """

    def find_vertex_path(
        self, source: Vertex, destination: Vertex
    ) -> Optional[VertexPath]:
        parent: Dict[Vertex, Vertex] = {}
        visited: Set[Vertex] = {source}
        queue: Deque[Vertex] = deque([source])

        while queue:
            current = queue.popleft()
            if current is destination:
                path = reconstruct_path(parent, destination)
                logger.debug(
                    "BFS found %r -> %r in %d edge(s)",
                    source,
                    destination,
                    len(path) - 1,
                )
                return path

            for neighbor in current.adjacents:
                if neighbor not in visited:
                    visited.add(neighbor)
                    parent[neighbor] = current
                    queue.append(neighbor)

        logger.debug("BFS found no path %r -> %r", source, destination)
        return None
