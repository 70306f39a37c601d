from __future__ import annotations

from typing import Union

from wgraph.algorithms.base import Search, SearchAlg
from wgraph.algorithms.bfs import BreadthFirstSearch
from wgraph.algorithms.dijkstra import DijkstraSearch


def search_fabric(alg: Union[SearchAlg, str]) -> Search:
    """
    Build a search strategy for the given algorithm.

    Args:
        alg: A SearchAlg member or its case-insensitive name ("bfs",
            "dijkstra").

    Returns:
        A new Search instance.

    Raises:
        ValueError: If the algorithm is not recognized.
    """
    if isinstance(alg, str):
        try:
            alg = SearchAlg[alg.upper()]
        except KeyError:
            raise ValueError(f"Unknown search algorithm: {alg!r}") from None

    if alg == SearchAlg.BFS:
        return BreadthFirstSearch()
    if alg == SearchAlg.DIJKSTRA:
        return DijkstraSearch()
    raise ValueError(f"Unknown search algorithm: {alg!r}")
