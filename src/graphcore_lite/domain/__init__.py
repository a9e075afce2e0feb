"""Domain model for graphcore-lite.

Re-exports the shared types and configuration:
    from graphcore_lite.domain import GraphOptions, NodeId
"""
from graphcore_lite.domain.options import GraphOptions
from graphcore_lite.domain.types import EdgeKey, EdgeName, NodeId

__all__ = [
    "EdgeKey",
    "EdgeName",
    "GraphOptions",
    "NodeId",
]
