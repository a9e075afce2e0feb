"""Exceptions raised when a mutation would break a structural invariant.

Lookups of missing nodes or edges never raise; they return None or an
empty sequence.  Only the three invariant violations below are errors.
"""
from __future__ import annotations

from graphcore_lite.domain.types import EdgeName, NodeId


class GraphError(Exception):
    """Base class for graph invariant violations."""


class InvalidMultiEdgeError(GraphError, ValueError):
    """Raised when a named edge is added to a graph that is not a multigraph."""

    def __init__(self, v: NodeId, w: NodeId, name: EdgeName) -> None:
        self.v = v
        self.w = w
        self.name = name
        super().__init__(
            f"Cannot set named edge {v!r} -> {w!r} ({name!r}) "
            f"when multigraph is disabled"
        )


class NotCompoundError(GraphError, TypeError):
    """Raised when a parent is set on a graph built without compound mode."""

    def __init__(self, node: NodeId) -> None:
        self.node = node
        super().__init__(
            f"Cannot set parent of {node!r} in a non-compound graph"
        )


class CycleViolationError(GraphError, ValueError):
    """Raised when set_parent would make a node its own ancestor."""

    def __init__(self, node: NodeId, parent: NodeId) -> None:
        self.node = node
        self.parent = parent
        super().__init__(
            f"Setting {parent!r} as parent of {node!r} would create a cycle"
        )
