"""Path search strategies over WeightedGraph vertices."""

from wgraph.algorithms.base import Path, Search, SearchAlg, VertexPath
from wgraph.algorithms.bfs import BreadthFirstSearch
from wgraph.algorithms.dijkstra import DijkstraSearch
from wgraph.algorithms.fabric import search_fabric
from wgraph.algorithms.path_utils import path_weight, reconstruct_path

__all__ = [
    "Path",
    "VertexPath",
    "Search",
    "SearchAlg",
    "BreadthFirstSearch",
    "DijkstraSearch",
    "search_fabric",
    "reconstruct_path",
    "path_weight",
]
