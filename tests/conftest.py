"""Shared graph fixtures.

Each fixture returns ``(graph, vertices)`` where ``vertices`` maps payload to
the Vertex registered for it.
"""

from __future__ import annotations

import pytest

from wgraph.graph import WeightedGraph
from wgraph.vertex import Vertex


def make_graph(payloads, edges):
    graph = WeightedGraph()
    vertices = {p: graph.add_vertex(Vertex(p)) for p in payloads}
    for src, dst, weight in edges:
        graph.add_edge(vertices[src], vertices[dst], weight)
    return graph, vertices


@pytest.fixture
def farm():
    #        [9]
    #  donkey────sheep
    #    │          │
    #  [8]        [3]
    #    │          │
    #  horse─────cow
    #        [5]
    return make_graph(
        ["donkey", "sheep", "cow", "horse"],
        [
            ("donkey", "sheep", 9.0),
            ("sheep", "cow", 3.0),
            ("cow", "horse", 5.0),
            ("horse", "donkey", 8.0),
        ],
    )


@pytest.fixture
def heavy_shortcut():
    # Direct A-D edge is one hop but expensive; A-B-C-D is cheap.
    #
    #  A──[1]──B──[1]──C──[1]──D
    #  └──────────[100]────────┘
    return make_graph(
        ["A", "B", "C", "D"],
        [("A", "B", 1), ("B", "C", 1), ("C", "D", 1), ("A", "D", 100)],
    )


@pytest.fixture
def diamond():
    # Two equal-length routes from A to D, all weights 1.
    #
    #     B
    #   /   \
    #  A     D
    #   \   /
    #     C
    return make_graph(
        ["A", "B", "C", "D"],
        [("A", "B", 1), ("A", "C", 1), ("B", "D", 1), ("C", "D", 1)],
    )


@pytest.fixture
def relaxed_twice():
    # B is first reached directly at cost 10, then improved to 2 via C.
    return make_graph(
        ["A", "B", "C", "E"],
        [("A", "B", 10), ("A", "C", 1), ("C", "B", 1), ("B", "E", 1)],
    )


@pytest.fixture
def two_islands():
    # {A, B} and {C, D} with no edge between the components.
    return make_graph(["A", "B", "C", "D"], [("A", "B", 1), ("C", "D", 2)])
