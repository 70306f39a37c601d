from wgraph.vertex import Vertex


class TestVertex:
    def test_payload(self):
        assert Vertex("donkey").payload == "donkey"

    def test_starts_without_adjacents(self):
        assert Vertex(1).adjacents == {}

    def test_add_adjacent_inserts_and_overwrites(self):
        a, b = Vertex("a"), Vertex("b")
        a.add_adjacent(b, 2.0)
        assert a.adjacents == {b: 2.0}

        a.add_adjacent(b, 5.0)
        assert a.adjacents == {b: 5.0}
        # One-sided: the vertex does not mirror the edge itself
        assert b.adjacents == {}

    def test_adjacents_keep_insertion_order(self):
        a = Vertex("a")
        others = [Vertex(i) for i in range(5)]
        for weight, other in enumerate(reversed(others)):
            a.add_adjacent(other, weight)
        assert list(a.adjacents) == list(reversed(others))

    def test_identity_not_payload_equality(self):
        first, second = Vertex("same"), Vertex("same")
        assert first != second
        assert len({first, second}) == 2
        assert first == first

    def test_repr(self):
        assert repr(Vertex("cow")) == "Vertex('cow')"
