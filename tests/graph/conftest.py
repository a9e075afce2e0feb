"""Shared fixtures for graph tests."""
from __future__ import annotations

from typing import Any

import pytest

from graphcore_lite.graph.adjacency import Graph


class Recorder:
    """Collects the positional arguments of every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> None:
        self.calls.append(args)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def g() -> Graph:
    return Graph()


@pytest.fixture
def directed_example() -> Graph:
    """
    a -> b -> c
         ^
         |
    d -> e
    """
    g = Graph()
    for node in "abcde":
        g.set_node(node)
    g.set_edge("a", "b")
    g.set_edge("b", "c")
    g.set_edge("d", "e")
    g.set_edge("e", "b")
    return g


@pytest.fixture
def undirected_example() -> Graph:
    """
    a -- b -- c
         |
    d -- e
    """
    g = Graph(directed=False)
    g.set_edge("a", "b")
    g.set_edge("b", "c")
    g.set_edge("d", "e")
    g.set_edge("e", "b")
    return g


@pytest.fixture
def compound_example() -> Graph:
    """
    a -> b -> c, d -> e -> b; b is a child of a, e a child of d
    """
    g = Graph(compound=True)
    g.set_path(["a", "b", "c"])
    g.set_path(["d", "e", "b"])
    g.set_parent("b", "a")
    g.set_parent("e", "d")
    return g
