"""Shared fixtures: every contract test runs against each backend."""

import pytest

from contactbook.infrastructure import (
    AdjacencyListBackend,
    AdjacencyMatrixBackend,
    FlatMapBackend,
)


def make_adjacency_list(directed: bool = False):
    return AdjacencyListBackend(directed=directed)


def make_adjacency_matrix(directed: bool = False):
    return AdjacencyMatrixBackend(16, directed=directed)


def make_flat_map(directed: bool = False):
    return FlatMapBackend()


ALL_BACKENDS = {
    "adjacency_list": make_adjacency_list,
    "adjacency_matrix": make_adjacency_matrix,
    "flat_map": make_flat_map,
}
GRAPH_BACKENDS = {
    "adjacency_list": make_adjacency_list,
    "adjacency_matrix": make_adjacency_matrix,
}


@pytest.fixture(params=sorted(ALL_BACKENDS))
def store(request):
    """An empty store of each backend kind."""
    return ALL_BACKENDS[request.param]()


@pytest.fixture(params=sorted(GRAPH_BACKENDS))
def make_graph(request):
    """Factory for an empty graph backend of each kind: make_graph(directed=...)."""
    return GRAPH_BACKENDS[request.param]


@pytest.fixture
def graph(make_graph):
    """An empty undirected graph backend of each kind."""
    return make_graph(directed=False)


@pytest.fixture
def digraph(make_graph):
    """An empty directed graph backend of each kind."""
    return make_graph(directed=True)
