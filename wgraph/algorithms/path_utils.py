from __future__ import annotations

from typing import Dict, Sequence

from wgraph.algorithms.base import VertexPath
from wgraph.vertex import Vertex


def reconstruct_path(parent: Dict[Vertex, Vertex], destination: Vertex) -> VertexPath:
    """
    Walk the parent map back from destination and return the forward path.

    The walk stops at the first vertex without a parent entry, which is the
    search source. The collected vertices are reversed so the source comes
    first.

    Args:
        parent: Maps each discovered vertex to the vertex that discovered it.
        destination: The vertex the walk starts from.

    Returns:
        Vertices from the source to destination inclusive.
    """
    path = []
    current = destination
    while current is not None:
        path.append(current)
        current = parent.get(current)
    path.reverse()
    return path


def path_weight(path: Sequence[Vertex]) -> float:
    """
    Return the total weight of the edges along a vertex path.

    Raises:
        KeyError: If two consecutive vertices are not adjacent.
    """
    total = 0.0
    for current, following in zip(path, path[1:]):
        try:
            total += current.adjacents[following]
        except KeyError:
            raise KeyError(f"No edge between {current!r} and {following!r}.") from None
    return total
