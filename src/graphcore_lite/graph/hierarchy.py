"""Parent/child forest for compound graphs.

Every node has exactly one parent.  Top-level nodes hang off ROOT, a
virtual sentinel that is never a node of the graph itself.  Both maps
are keyed by node id; nothing here holds a reference to node values.

Invariant: following parent links from any node reaches ROOT without
revisiting a node.
"""
from __future__ import annotations

import logging
from typing import Hashable, Iterator

from graphcore_lite.domain.types import NodeId
from graphcore_lite.graph.errors import CycleViolationError

log = logging.getLogger(__name__)


class _Root:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<root>"


ROOT: Hashable = _Root()


class Hierarchy:
    """Parent map plus children sets rooted at ROOT."""

    __slots__ = ("_parent", "_children")

    def __init__(self) -> None:
        self._parent: dict[NodeId, Hashable] = {}
        self._children: dict[Hashable, dict[NodeId, None]] = {ROOT: {}}

    def add(self, node: NodeId) -> None:
        """Register a new node as a top-level child of ROOT."""
        self._parent[node] = ROOT
        self._children[node] = {}
        self._children[ROOT][node] = None

    def parent(self, node: NodeId) -> NodeId | None:
        p = self._parent.get(node)
        if p is None or p is ROOT:
            return None
        return p  # type: ignore[return-value]

    def children(self, node: Hashable = ROOT) -> Iterator[NodeId]:
        yield from self._children.get(node, ())

    def check_parent(self, node: NodeId, parent: NodeId) -> None:
        """Raise CycleViolationError if *node* is *parent* or one of its ancestors."""
        ancestor: NodeId | None = parent
        while ancestor is not None:
            if ancestor == node:
                raise CycleViolationError(node, parent)
            ancestor = self.parent(ancestor)

    def move(self, node: NodeId, parent: Hashable = ROOT) -> None:
        """Detach *node* from its current parent and attach it under *parent*."""
        self._detach(node)
        self._parent[node] = parent
        self._children[parent][node] = None

    def remove(self, node: NodeId) -> None:
        """Drop *node*, handing its direct children to its former parent."""
        former = self._parent[node]
        self._detach(node)
        del self._parent[node]
        orphans = self._children.pop(node)
        if orphans:
            log.debug(
                "Reparenting %d child(ren) of %r to %r", len(orphans), node, former
            )
        for child in orphans:
            self._parent[child] = former
            self._children[former][child] = None

    def _detach(self, node: NodeId) -> None:
        self._children[self._parent[node]].pop(node, None)
