"""Command-line interface for wgraph."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from wgraph.algorithms import SearchAlg, search_fabric
from wgraph.graph import UnknownVertexError, WeightedGraph
from wgraph.io import VertexMap, load_graph_yaml
from wgraph.logging import get_logger, set_global_log_level
from wgraph.vertex import Vertex

logger = get_logger(__name__)

#: Display headers per algorithm, as printed by the demo.
_HEADERS = {
    SearchAlg.BFS: "Breadth First Search:",
    SearchAlg.DIJKSTRA: "Dijkstra's:",
}


def build_sample_graph() -> Tuple[WeightedGraph, VertexMap]:
    """Return the four-vertex demo cycle donkey-sheep-cow-horse."""
    graph = WeightedGraph()
    vertex_map: VertexMap = {}
    for name in ("donkey", "sheep", "cow", "horse"):
        vertex_map[name] = graph.add_vertex(Vertex(name))

    graph.add_edge(vertex_map["donkey"], vertex_map["sheep"], 9.0)
    graph.add_edge(vertex_map["sheep"], vertex_map["cow"], 3.0)
    graph.add_edge(vertex_map["cow"], vertex_map["horse"], 5.0)
    graph.add_edge(vertex_map["horse"], vertex_map["donkey"], 8.0)
    return graph, vertex_map


def _lookup(vertex_map: VertexMap, payload: str) -> Vertex:
    try:
        return vertex_map[payload]
    except KeyError:
        raise UnknownVertexError(f"Vertex '{payload}' is not in the graph.") from None


def _print_paths(
    vertex_map: VertexMap,
    source: str,
    destination: str,
    algorithms: List[SearchAlg],
) -> None:
    src = _lookup(vertex_map, source)
    dst = _lookup(vertex_map, destination)
    for alg in algorithms:
        logger.info(f"Running {alg.name} from '{source}' to '{destination}'")
        path = search_fabric(alg).find_path(src, dst)
        print(_HEADERS[alg])
        if path is None:
            print("No path found")
        else:
            print(" ".join(str(payload) for payload in path))


def _selected_algorithms(name: str) -> List[SearchAlg]:
    if name == "all":
        return list(SearchAlg)
    return [SearchAlg[name.upper()]]


def _run_demo(source: str, destination: str) -> None:
    """Print both strategies' paths over the sample graph."""
    _, vertex_map = build_sample_graph()
    try:
        _print_paths(vertex_map, source, destination, list(SearchAlg))
    except UnknownVertexError as e:
        logger.error(f"Demo failed: {e}")
        print(f"ERROR: {e}")
        sys.exit(1)


def _run_find(path: Path, source: str, destination: str, algorithm: str) -> None:
    """Load a graph YAML file and print the path(s) between two payloads.

    Args:
        path: Graph YAML file.
        source: Payload of the start vertex.
        destination: Payload of the target vertex.
        algorithm: "bfs", "dijkstra" or "all".
    """
    logger.info(f"Loading graph from: {path}")
    try:
        _, vertex_map = load_graph_yaml(path.read_text())
        _print_paths(
            vertex_map, source, destination, _selected_algorithms(algorithm)
        )
    except FileNotFoundError:
        logger.error(f"Graph file not found: {path}")
        print(f"ERROR: Graph file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to search graph: {type(e).__name__}: {e}")
        print(f"ERROR: Failed to search graph: {type(e).__name__}: {e}")
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``wgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="wgraph",
        description="Find paths in undirected weighted graphs.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{demo,find}",
        help="Available commands",
    )

    demo_parser = subparsers.add_parser(
        "demo", help="Search the built-in donkey/sheep/cow/horse graph"
    )
    demo_parser.add_argument("--source", default="donkey", help="Start vertex")
    demo_parser.add_argument("--destination", default="horse", help="Target vertex")

    find_parser = subparsers.add_parser("find", help="Search a graph YAML file")
    find_parser.add_argument("graph", type=Path, help="Path to graph YAML")
    find_parser.add_argument("source", help="Start vertex")
    find_parser.add_argument("destination", help="Target vertex")
    find_parser.add_argument(
        "--algorithm",
        "-a",
        choices=["bfs", "dijkstra", "all"],
        default="all",
        help="Search strategy to run (default: all)",
    )

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "demo":
        _run_demo(args.source, args.destination)
    elif args.command == "find":
        _run_find(args.graph, args.source, args.destination, args.algorithm)


if __name__ == "__main__":
    main()
