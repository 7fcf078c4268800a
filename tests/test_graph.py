import pytest

from ampkit.graph import AdjacencyList, Graph

EDGES = [
    (0, 1, 3), (0, 2, 1), (0, 3, 3), (0, 4, 1), (0, 5, 3),
    (1, 6, 1), (1, 7, 3), (2, 1, 0), (2, 7, 3), (2, 8, 2),
    (2, 9, 1), (3, 9, 1), (4, 9, 1), (4, 10, 2), (4, 11, 3),
    (4, 5, 2), (5, 11, 1), (5, 12, 1), (6, 7, 1), (7, 13, 1),
    (8, 13, 3), (9, 13, 3), (10, 13, 3), (11, 13, 1), (12, 11, 3),
]


@pytest.fixture
def graph():
    g = Graph()
    for src, dst, w in EDGES:
        g.connect(src, dst, w)
    return g


def test_adjacency_connect_and_len():
    adj = AdjacencyList()
    assert adj.connect(3, "a") == 1
    assert adj.connect(4, "b") == 2
    assert len(adj) == 2


def test_adjacency_disconnect_any_edge():
    adj = AdjacencyList()
    adj.connect(1, "a")
    adj.connect(2, "b")
    adj.connect(1, "c")
    assert adj.disconnect(1) == 2
    assert adj.nodes == [2]
    assert adj.edges == ["b"]


def test_adjacency_disconnect_matching_edge():
    adj = AdjacencyList()
    adj.connect(1, "a")
    adj.connect(1, "c")
    assert adj.disconnect(1, "c") == 1
    assert adj.edges == ["a"]


def test_adjacency_disconnect_if():
    adj = AdjacencyList()
    for n in range(5):
        adj.connect(n, n * 10)
    assert adj.disconnect_if(lambda n, e: e >= 30) == 2
    assert adj.nodes == [0, 1, 2]


def test_graph_size_and_nodes(graph):
    assert len(graph) == 14
    assert graph.nodes() == list(range(14))


def test_children_and_edges_in_order(graph):
    assert graph.children(0) == [1, 2, 3, 4, 5]
    assert graph.outgoing_edges(0) == [3, 1, 3, 1, 3]


def test_parents_mirror_children(graph):
    for node in graph.nodes():
        for child, edge in zip(graph.children(node), graph.outgoing_edges(node)):
            assert node in graph.parents(child)
    assert sorted(graph.parents(13)) == [7, 8, 9, 10, 11]


def test_disconnect(graph):
    assert graph.disconnect(0, 1) is True
    assert 1 not in graph.children(0)
    assert 0 not in graph.parents(1)
    assert graph.disconnect(0, 1) is False


def test_disconnect_with_edge(graph):
    assert graph.disconnect(2, 8, 99) is False
    assert graph.disconnect(2, 8, 2) is True
    assert 8 not in graph.children(2)


def test_disconnect_unknown_node_raises(graph):
    with pytest.raises(ValueError):
        graph.disconnect(0, 100)


def test_reverse_swaps_direction(graph):
    before_children = graph.children(4)
    graph.reverse()
    assert graph.parents(4) == before_children
    assert graph.children(13) == graph.incoming_edges(13) and False or sorted(
        graph.children(13)
    ) == [7, 8, 9, 10, 11]


def test_non_reversible_rejects_backward_queries():
    g = Graph(reversible=False)
    g.connect(0, 1, 1.0)
    with pytest.raises(ValueError):
        g.parents(1)
    with pytest.raises(ValueError):
        g.incoming_edges(1)
    with pytest.raises(ValueError):
        g.reverse()
    assert g.nodes() == [0]


def test_format_lists_connections():
    g = Graph()
    g.connect(0, 1, 2.5)
    text = g.format("Map")
    assert text.splitlines() == [
        "Map:",
        "Node 0 is connected to:",
        "    - child node 1 with edge: 2.5",
    ]


def test_clear(graph):
    graph.clear()
    assert len(graph) == 0
    assert graph.nodes() == []