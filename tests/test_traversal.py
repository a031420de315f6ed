"""BFS/DFS tests over both graph backends."""

from collections.abc import Iterator

from contactbook.application import NotFound, bfs, dfs
from contactbook.domain import ContactRecord


def _names(records):
    return [r.name for r in records]


def _tree(store):
    """Alice -> Bob, Carol; Bob -> Dave; Carol -> Erin; Frank is isolated."""
    for i, name in enumerate(("Alice", "Bob", "Carol", "Dave", "Erin", "Frank"), start=1):
        store.add(ContactRecord(name, i))
    store.add_connection("Alice", "Bob")
    store.add_connection("Alice", "Carol")
    store.add_connection("Bob", "Dave")
    store.add_connection("Carol", "Erin")
    return store


def test_bfs_visits_by_distance(graph):
    _tree(graph)
    assert _names(bfs(graph, "Alice")) == ["Alice", "Bob", "Carol", "Dave", "Erin"]


def test_dfs_is_pre_order(graph):
    _tree(graph)
    assert _names(dfs(graph, "Alice")) == ["Alice", "Bob", "Dave", "Carol", "Erin"]


def test_undirected_traversal_reaches_whole_component(graph):
    _tree(graph)
    assert set(_names(bfs(graph, "Erin"))) == {"Alice", "Bob", "Carol", "Dave", "Erin"}
    assert set(_names(dfs(graph, "Erin"))) == {"Alice", "Bob", "Carol", "Dave", "Erin"}


def test_directed_traversal_follows_edge_direction(digraph):
    _tree(digraph)
    assert _names(bfs(digraph, "Bob")) == ["Bob", "Dave"]
    assert _names(dfs(digraph, "Erin")) == ["Erin"]


def test_each_node_visited_once_with_cycles(graph):
    for i, name in enumerate(("A", "B", "C", "D"), start=1):
        graph.add(ContactRecord(name, i))
    for a, b in (("A", "B"), ("B", "C"), ("C", "A"), ("C", "D"), ("D", "A")):
        graph.add_connection(a, b)
    bfs_order = _names(bfs(graph, "A"))
    dfs_order = _names(dfs(graph, "A"))
    assert sorted(bfs_order) == ["A", "B", "C", "D"]
    assert sorted(dfs_order) == ["A", "B", "C", "D"]
    assert len(bfs_order) == len(dfs_order) == 4


def test_isolated_start_visits_only_itself(graph):
    _tree(graph)
    assert _names(bfs(graph, "Frank")) == ["Frank"]
    assert _names(dfs(graph, "Frank")) == ["Frank"]


def test_unknown_start_reported_eagerly(graph):
    assert isinstance(bfs(graph, "Nobody"), NotFound)
    assert isinstance(dfs(graph, "Nobody"), NotFound)


def test_traversal_is_lazy_and_single_use(graph):
    _tree(graph)
    walk = bfs(graph, "Alice")
    assert isinstance(walk, Iterator)
    assert next(walk).name == "Alice"
    assert len(list(walk)) == 4
    assert list(walk) == []


def test_deep_chain_does_not_hit_recursion_limit():
    from contactbook.infrastructure import AdjacencyListBackend

    chain = AdjacencyListBackend(directed=True)
    for i in range(1200):
        chain.add(ContactRecord(f"n{i}", i))
    for i in range(1199):
        chain.add_connection(f"n{i}", f"n{i + 1}")
    assert sum(1 for _ in dfs(chain, "n0")) == 1200
