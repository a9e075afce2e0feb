"""Construction options for a Graph.

Three independent switches select the graph's mode:
  - directed:   edges are ordered (v -> w) instead of symmetric
  - multigraph: several edges may join the same pair, told apart by name
  - compound:   nodes also form a parent/child forest

The options are frozen once built; a graph never changes mode.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class GraphOptions:
    """Mode flags for a graph. Defaults describe a simple directed graph."""
    directed: bool = True
    multigraph: bool = False
    compound: bool = False

    def __post_init__(self) -> None:
        for f in fields(self):
            if not isinstance(getattr(self, f.name), bool):
                raise ValueError(f"GraphOptions.{f.name} must be a bool")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> GraphOptions:
        """Build options from a plain dict.

        Missing keys keep their defaults, present values are coerced
        with bool().  Unknown keys are rejected so that a typo such as
        "multiGraph" does not silently produce a simple graph.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(mapping) - known
        if unknown:
            raise ValueError(f"Unknown graph option(s): {sorted(unknown)}")
        return cls(**{k: bool(v) for k, v in mapping.items()})
