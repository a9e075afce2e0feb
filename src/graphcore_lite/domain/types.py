"""Shared type aliases used across the graph engine."""
from __future__ import annotations

from typing import TypeAlias

NodeId: TypeAlias = str
EdgeName: TypeAlias = str
EdgeKey: TypeAlias = tuple[NodeId, NodeId, EdgeName | None]  # see graph.edge_id
