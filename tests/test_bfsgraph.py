import pytest

from cursorkit.bfsgraph import INF, NIL, Graph, GraphError


@pytest.fixture
def square():
    g = Graph(4)
    g.add_edge(1, 2)
    g.add_edge(1, 4)
    g.add_edge(4, 3)
    g.add_edge(2, 3)
    return g


def test_new_graph_state():
    g = Graph(4)
    assert g.order() == 4
    assert g.size() == 0
    assert g.source() == NIL
    assert all(g.parent(u) == NIL for u in range(1, 5))
    assert all(g.distance(u) == INF for u in range(1, 5))


def test_empty_graph_str():
    assert str(Graph(2)) == "1: \n2: \n"


def test_square_size(square):
    assert square.size() == 4


def test_square_first_line(square):
    assert str(square).splitlines()[0] == "1: 2 4 "


def test_str_has_one_line_per_vertex(square):
    lines = str(square).splitlines()
    assert len(lines) == square.order()
    for u, line in enumerate(lines, start=1):
        assert line.startswith(f"{u}: ")


def test_neighbors_sorted_and_symmetric(square):
    for u in range(1, 5):
        nbrs = square.neighbors(u)
        assert list(nbrs) == sorted(nbrs)
        for v in nbrs:
            assert u in square.neighbors(v)


def test_add_arc_is_one_sided():
    g = Graph(3)
    g.add_arc(1, 3)
    assert g.neighbors(1) == (3,)
    assert g.neighbors(3) == ()
    assert g.size() == 1


def test_add_edge_increments_size(square):
    before = square.size()
    square.add_edge(2, 4)
    assert square.size() == before + 1
    assert 4 in square.neighbors(2)
    assert 2 in square.neighbors(4)


def test_duplicate_edges_are_kept():
    g = Graph(2)
    g.add_edge(1, 2)
    g.add_edge(1, 2)
    assert g.neighbors(1) == (2, 2)
    assert g.size() == 2


def test_bfs_tree_invariants(square):
    square.bfs(1)
    assert square.source() == 1
    assert square.parent(1) == NIL
    assert square.distance(1) == 0
    for v in range(2, 5):
        p = square.parent(v)
        assert v in square.neighbors(p)
        assert square.distance(v) == square.distance(p) + 1


def test_bfs_distance_pinned(square):
    square.bfs(1)
    assert square.distance(3) == 2


def test_path_invariants(square):
    square.bfs(1)
    for v in range(1, 5):
        path = square.path(v)
        assert path[0] == 1
        assert path[-1] == v
        assert len(path) == square.distance(v) + 1
        for a, b in zip(path, path[1:]):
            assert b in square.neighbors(a)


def test_unreachable_after_make_null(square):
    square.make_null()
    assert square.size() == 0
    assert all(square.neighbors(u) == () for u in range(1, 5))
    square.add_edge(1, 3)
    square.bfs(1)
    assert square.path(2) == [NIL]
    assert square.distance(2) == INF
    assert square.path(3) == [1, 3]


def test_path_before_bfs_raises(square):
    with pytest.raises(GraphError):
        square.path(2)


@pytest.mark.parametrize("bad", [0, 5, -1])
def test_invalid_vertices_raise(square, bad):
    with pytest.raises(GraphError):
        square.parent(bad)
    with pytest.raises(GraphError):
        square.distance(bad)
    with pytest.raises(GraphError):
        square.add_edge(1, bad)
    with pytest.raises(GraphError):
        square.add_arc(bad, 1)
    with pytest.raises(GraphError):
        square.bfs(bad)
    with pytest.raises(GraphError):
        square.neighbors(bad)


def test_negative_order_raises():
    with pytest.raises(GraphError):
        Graph(-1)