"""In-memory graph engine: nodes, edges, adjacency and compound hierarchy."""

from graphcore_lite.graph.adjacency import Graph
from graphcore_lite.graph.edge_id import (
    MISSING,
    EdgeDescriptor,
    edge_descriptor,
    edge_key,
)
from graphcore_lite.graph.errors import (
    CycleViolationError,
    GraphError,
    InvalidMultiEdgeError,
    NotCompoundError,
)
from graphcore_lite.graph.events import GraphEvent, Notifier
from graphcore_lite.graph.hierarchy import ROOT

__all__ = [
    "CycleViolationError",
    "EdgeDescriptor",
    "Graph",
    "GraphError",
    "GraphEvent",
    "InvalidMultiEdgeError",
    "MISSING",
    "NotCompoundError",
    "Notifier",
    "ROOT",
    "edge_descriptor",
    "edge_key",
]
