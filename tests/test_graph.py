import pytest

from dsakit.graph import DuplicateEdgeError, Edge, Graph

SAMPLE_EDGES = [
    (0, 1, 4), (0, 7, 9), (1, 2, 8), (1, 7, 11), (2, 3, 1), (2, 8, 4),
    (3, 8, 2), (2, 7, 7), (2, 5, 4), (3, 4, 9), (3, 5, 14), (3, 7, 3),
    (4, 5, 10), (5, 6, 2), (5, 3, 2), (6, 7, 1), (6, 1, 1), (6, 8, 6),
    (7, 8, 8), (7, 1, 8),
]


@pytest.fixture
def sample():
    graph = Graph()
    for src, dest, weight in SAMPLE_EDGES:
        graph.add_edge(src, dest, weight)
    return graph


def test_add_edge_grows_graph():
    graph = Graph()
    graph.add_edge(0, 4, 3)
    assert len(graph) == 5
    assert graph.weight(0, 4) == 3
    assert graph.has_edge(0, 4)
    assert not graph.has_edge(4, 0)


def test_add_vertex_fills_gaps():
    graph = Graph(2)
    graph.add_vertex(5)
    assert len(graph) == 6
    graph.add_vertex(1)
    assert len(graph) == 6


def test_negative_vertex_rejected():
    with pytest.raises(ValueError):
        Graph().add_vertex(-1)


def test_duplicate_edge_raises(sample):
    with pytest.raises(DuplicateEdgeError):
        sample.add_edge(0, 1, 100)
    assert sample.weight(0, 1) == 4


def test_undirected_edge_adds_both_directions():
    graph = Graph(3)
    graph.add_undirected_edge(0, 2, 5)
    assert graph.weight(0, 2) == 5
    assert graph.weight(2, 0) == 5
    with pytest.raises(DuplicateEdgeError):
        graph.add_undirected_edge(2, 0, 1)


def test_weight_missing_edge_raises(sample):
    with pytest.raises(KeyError):
        sample.weight(8, 0)
    assert not sample.has_edge(100, 0)


def test_neighbours_sorted(sample):
    assert sample.neighbours(2) == [3, 5, 7, 8]
    assert sample.neighbours(8) == []


def test_edges_match_input(sample):
    edges = list(sample.edges())
    assert len(edges) == len(SAMPLE_EDGES)
    assert {(e.src, e.dest, e.weight) for e in edges} == set(SAMPLE_EDGES)
    assert edges == sorted(edges, key=lambda e: (e.src, e.dest))


def test_transpose_reverses_edges(sample):
    transposed = sample.transpose()
    assert len(transposed) == len(sample)
    assert {(e.dest, e.src, e.weight) for e in transposed.edges()} == set(SAMPLE_EDGES)
    assert list(transposed.transpose().edges()) == list(sample.edges())


def test_transpose_edge_objects():
    graph = Graph()
    graph.add_edge(1, 0, 7)
    assert list(graph.transpose().edges()) == [Edge(0, 1, 7)]


def test_dfs_order(sample):
    assert sample.dfs(0) == list(range(9))


def test_bfs_order(sample):
    assert sample.bfs(0) == [0, 1, 7, 2, 8, 3, 5, 4, 6]


def test_traversals_visit_each_reachable_vertex_once(sample):
    for source in range(len(sample)):
        dfs = sample.dfs(source)
        bfs = sample.bfs(source)
        assert dfs[0] == source and bfs[0] == source
        assert len(set(dfs)) == len(dfs)
        assert set(dfs) == set(bfs)


def test_traversal_from_sink(sample):
    assert sample.dfs(8) == [8]
    assert sample.bfs(8) == [8]


def test_traversal_out_of_range(sample):
    with pytest.raises(IndexError):
        sample.dfs(42)
    with pytest.raises(IndexError):
        sample.bfs(-1)


def test_sample_not_strongly_connected(sample):
    assert sample.is_strongly_connected() is False


def test_cycle_is_strongly_connected():
    graph = Graph(4)
    for vertex in range(4):
        graph.add_edge(vertex, (vertex + 1) % 4, 1)
    assert graph.is_strongly_connected() is True
    assert graph.transpose().is_strongly_connected() is True


def test_one_way_reachability_not_strong():
    graph = Graph(3)
    graph.add_edge(0, 1, 1)
    graph.add_edge(1, 2, 1)
    graph.add_edge(2, 1, 1)
    assert graph.dfs(0) == [0, 1, 2]
    assert graph.is_strongly_connected() is False