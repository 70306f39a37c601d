import pytest

from wgraph.algorithms import (
    BreadthFirstSearch,
    DijkstraSearch,
    Search,
    SearchAlg,
    path_weight,
    reconstruct_path,
    search_fabric,
)
from wgraph.vertex import Vertex

STRATEGIES = [BreadthFirstSearch, DijkstraSearch]


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_farm_sample(strategy, farm):
    _, v = farm
    assert strategy().find_path(v["donkey"], v["horse"]) == ["donkey", "horse"]


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_same_vertex_single_payload(strategy, farm):
    _, v = farm
    for vertex in v.values():
        assert strategy().find_path(vertex, vertex) == [vertex.payload]


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_two_unconnected_vertices(strategy):
    a, b = Vertex("A"), Vertex("B")
    assert strategy().find_path(a, b) is None


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_path_endpoints(strategy, farm):
    _, v = farm
    for src in v.values():
        for dst in v.values():
            path = strategy().find_path(src, dst)
            assert path[0] == src.payload
            assert path[-1] == dst.payload


def test_search_is_abstract():
    with pytest.raises(TypeError):
        Search()


class TestReconstructPath:
    def test_walks_back_to_source(self):
        a, b, c = Vertex("a"), Vertex("b"), Vertex("c")
        assert reconstruct_path({b: a, c: b}, c) == [a, b, c]

    def test_source_only(self):
        a = Vertex("a")
        assert reconstruct_path({}, a) == [a]


class TestPathWeight:
    def test_sums_edges(self, farm):
        _, v = farm
        path = [v["donkey"], v["sheep"], v["cow"], v["horse"]]
        assert path_weight(path) == 17.0

    def test_single_vertex_is_free(self, farm):
        _, v = farm
        assert path_weight([v["cow"]]) == 0.0

    def test_non_adjacent_raises(self, farm):
        _, v = farm
        with pytest.raises(KeyError):
            path_weight([v["donkey"], v["cow"]])


class TestSearchFabric:
    def test_by_enum(self):
        assert isinstance(search_fabric(SearchAlg.BFS), BreadthFirstSearch)
        assert isinstance(search_fabric(SearchAlg.DIJKSTRA), DijkstraSearch)

    def test_by_name(self):
        assert isinstance(search_fabric("bfs"), BreadthFirstSearch)
        assert isinstance(search_fabric("Dijkstra"), DijkstraSearch)

    def test_unknown(self):
        with pytest.raises(ValueError):
            search_fabric("astar")
