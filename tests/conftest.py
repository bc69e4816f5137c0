"""Shared graph fixtures.

Each fixture builds a fresh graph so tests are free to mutate it.
"""

from __future__ import annotations

from typing import List, Tuple

import networkx as nx
import pytest

from fixpath.graph import Graph
from fixpath.nx import from_networkx


def build_graph(size: int, edges: List[Tuple[int, int]]) -> Graph:
    graph = Graph(size)
    for a, b in edges:
        graph.add_edge(a, b)
    return graph


@pytest.fixture
def square():
    #  0───1
    #  │   │
    #  3───2
    return build_graph(4, [(0, 1), (1, 2), (2, 3), (0, 3)])


@pytest.fixture
def five_cycle():
    #      0
    #    ╱   ╲
    #   4     1
    #   │     │
    #   3─────2
    return build_graph(5, [(0, 1), (1, 2), (2, 3), (3, 4), (4, 0)])


@pytest.fixture
def line5():
    #  0───1───2───3───4
    return build_graph(5, [(0, 1), (1, 2), (2, 3), (3, 4)])


@pytest.fixture
def disconnected():
    #  0───1   2
    return build_graph(3, [(0, 1)])


@pytest.fixture
def petersen():
    graph, _ = from_networkx(nx.petersen_graph())
    return graph


@pytest.fixture(params=[0, 1, 2, 3])
def random_graph(request):
    """Sparse G(n, p) graph whose vertex ids equal the networkx labels."""
    G = nx.gnp_random_graph(40, 0.08, seed=request.param)
    graph, _ = from_networkx(G)
    return G, graph


@pytest.fixture
def make_graph():
    """Factory fixture: ``make_graph(size, edges)``."""
    return build_graph
