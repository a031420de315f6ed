"""Connection contract tests for both graph backends, directed and undirected."""

from contactbook.application import (
    ConnectionAdded,
    ConnectionRemoved,
    ConnectionStore,
    ContactUpdated,
    InvalidConnection,
    NotFound,
    supports_connections,
)
from contactbook.domain import ContactRecord

ALICE = ContactRecord("Alice", 1)
BOB = ContactRecord("Bob", 2)
CAROL = ContactRecord("Carol", 3)


def _populate(store, *records):
    for record in records or (ALICE, BOB, CAROL):
        store.add(record)
    return store


def test_graph_backends_support_connections(graph):
    assert isinstance(graph, ConnectionStore)
    assert supports_connections(graph)


def test_undirected_connection_is_mirrored(graph):
    _populate(graph)
    result = graph.add_connection("Alice", "Bob")
    assert isinstance(result, ConnectionAdded)
    assert result.changed
    assert graph.has_connection(ALICE, BOB)
    assert graph.has_connection(BOB, ALICE)
    assert graph.neighbors(ALICE) == (BOB,)
    assert graph.neighbors(BOB) == (ALICE,)


def test_directed_connection_is_one_way(digraph):
    _populate(digraph)
    digraph.add_connection("Alice", "Bob")
    assert digraph.has_connection(ALICE, BOB)
    assert not digraph.has_connection(BOB, ALICE)
    assert digraph.neighbors(BOB) == ()


def test_add_connection_is_idempotent(graph):
    _populate(graph)
    graph.add_connection("Alice", "Bob")
    again = graph.add_connection("Bob", "Alice")
    assert isinstance(again, ConnectionAdded)
    assert not again.changed
    assert graph.neighbors(ALICE) == (BOB,)
    assert graph.neighbors(BOB) == (ALICE,)


def test_add_connection_with_unknown_endpoint(graph):
    _populate(graph)
    result = graph.add_connection("Alice", "Zed")
    assert isinstance(result, InvalidConnection)
    assert result.missing == ("Zed",)
    both = graph.add_connection("Yan", "Zed")
    assert isinstance(both, InvalidConnection)
    assert both.missing == ("Yan", "Zed")
    assert graph.neighbors(ALICE) == ()


def test_remove_connection_restores_prior_state(graph):
    _populate(graph)
    graph.add_connection("Bob", "Carol")
    graph.add_connection("Alice", "Bob")
    result = graph.remove_connection("Alice", "Bob")
    assert isinstance(result, ConnectionRemoved)
    assert result.changed
    assert not graph.has_connection(ALICE, BOB)
    assert not graph.has_connection(BOB, ALICE)
    assert graph.neighbors(BOB) == (CAROL,)


def test_remove_absent_connection_is_not_an_error(graph):
    _populate(graph)
    result = graph.remove_connection("Alice", "Carol")
    assert isinstance(result, ConnectionRemoved)
    assert not result.changed


def test_remove_connection_with_unknown_endpoint(graph):
    _populate(graph)
    assert isinstance(graph.remove_connection("Ghost", "Alice"), InvalidConnection)


def test_directed_remove_leaves_reverse_edge(digraph):
    _populate(digraph)
    digraph.add_connection("Alice", "Bob")
    digraph.add_connection("Bob", "Alice")
    digraph.remove_connection("Alice", "Bob")
    assert not digraph.has_connection(ALICE, BOB)
    assert digraph.has_connection(BOB, ALICE)


def test_delete_removes_every_edge_touching_contact(make_graph):
    for directed in (False, True):
        g = _populate(make_graph(directed=directed))
        g.add_connection("Alice", "Bob")
        g.add_connection("Carol", "Bob")
        g.add_connection("Bob", "Carol")
        g.delete("Bob")
        assert isinstance(g.search("Bob"), NotFound)
        for record in g.list_all():
            assert BOB not in g.neighbors(record)
        assert g.neighbors(ALICE) == ()
        assert g.neighbors(CAROL) == ()


def test_update_relinks_edges_in_both_directions(make_graph):
    for directed in (False, True):
        g = _populate(make_graph(directed=directed))
        g.add_connection("Alice", "Bob")
        g.add_connection("Carol", "Alice")
        result = g.update(ALICE, "Alicia", 1)
        assert isinstance(result, ContactUpdated)
        alicia = g.search("Alicia")
        assert alicia == ContactRecord("Alicia", 1)
        assert isinstance(g.search("Alice"), NotFound)
        assert g.has_connection(alicia, BOB)
        assert g.has_connection(CAROL, alicia)
        assert alicia in g.neighbors(CAROL)
        assert all(n.name != "Alice" for r in g.list_all() for n in g.neighbors(r))


def test_neighbors_keep_insertion_order_for_list_backend():
    from contactbook.infrastructure import AdjacencyListBackend

    g = _populate(AdjacencyListBackend(), ALICE, BOB, CAROL, ContactRecord("Dave", 4))
    g.add_connection("Alice", "Dave")
    g.add_connection("Alice", "Bob")
    assert [n.name for n in g.neighbors(ALICE)] == ["Dave", "Bob"]


def test_self_connection_is_allowed_once(graph):
    _populate(graph)
    first = graph.add_connection("Alice", "Alice")
    assert first.changed
    assert graph.neighbors(ALICE) == (ALICE,)
    assert graph.remove_connection("Alice", "Alice").changed
    assert graph.neighbors(ALICE) == ()
