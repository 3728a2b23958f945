"""Pytest configuration and fixtures for graphwalk-lib tests."""

import pytest

from graphwalk import Graph, create_graph


@pytest.fixture
def graph():
    """Create an empty graph and release it after the test."""
    g = create_graph(1)
    yield g
    if not g.released:
        g.release()


@pytest.fixture
def diamond(graph) -> Graph:
    """Graph with directed edges 1->2 (5), 1->3 (1), 2->4 (2), 3->4 (9).

        1 --> 2 --> 4
        |           ^
        +---> 3 ----+
    """
    for vid in (1, 2, 3, 4):
        graph.add_vertex(vid)
    graph.add_adjacent_many(1, [(2, 5), (3, 1)])
    graph.add_adjacent_many(2, [(4, 2)])
    graph.add_adjacent_many(3, [(4, 9)])
    return graph


@pytest.fixture
def undirected_graph(graph) -> Graph:
    """Undirected graph built from matched edge pairs, plus an isolated vertex 6.

        1 -- 2 -- 3
        |         |
        4 ------- 5      6
    """
    for vid in (1, 2, 3, 4, 5, 6):
        graph.add_vertex(vid)
    graph.add_undirected(1, 2, 7)
    graph.add_undirected(2, 3, 4)
    graph.add_undirected(1, 4, 1)
    graph.add_undirected(3, 5, 2)
    graph.add_undirected(4, 5, 3)
    return graph
