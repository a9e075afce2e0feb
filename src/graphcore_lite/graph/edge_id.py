"""Edge identity: canonical keys and immutable edge descriptors.

Every edge is stored under the tuple key

    (v, w, name)

where name is None for an edge without a name.  Names are always
strings, so an unnamed edge can never collide with a named one, and
the empty string is a legal name of its own.  A simple-graph edge and
an unnamed multigraph edge between the same pair share one key.

In an undirected graph the endpoints are put in string order before
the key is built, which makes {v, w} and {w, v} the same edge.  The
descriptor reports the same canonical (possibly swapped) endpoints.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NamedTuple

from graphcore_lite.domain.types import EdgeKey, EdgeName, NodeId


class _Missing:
    """Marker for "argument not supplied" where None is a real value."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


@dataclass(frozen=True, slots=True)
class EdgeDescriptor:
    """Immutable (v, w, name) record identifying one edge.

    Hashable, so it can be used as a dict key or passed straight back
    into edge queries.
    """
    v: NodeId
    w: NodeId
    name: EdgeName | None = None


class EdgeCall(NamedTuple):
    """One resolved edge call, whatever form the caller used."""
    v: NodeId
    w: NodeId
    name: EdgeName | None
    value: Any


def _canonical(directed: bool, v: NodeId, w: NodeId) -> tuple[NodeId, NodeId]:
    if not directed and v > w:
        return w, v
    return v, w


def edge_key(
    directed: bool, v: NodeId, w: NodeId, name: EdgeName | None = None
) -> EdgeKey:
    """Canonical key for the edge (v, w, name)."""
    v, w = _canonical(directed, v, w)
    return (v, w, name)


def edge_descriptor(
    directed: bool, v: NodeId, w: NodeId, name: EdgeName | None = None
) -> EdgeDescriptor:
    """Descriptor with canonical endpoints; name kept only if given."""
    v, w = _canonical(directed, v, w)
    return EdgeDescriptor(v, w, name)


def _name(name: Any) -> EdgeName | None:
    return None if name is None else str(name)


def resolve_edge_call(
    v: Any,
    w: Any = MISSING,
    name: Any = None,
    value: Any = MISSING,
) -> EdgeCall:
    """Collapse the accepted argument shapes into one EdgeCall.

    Two forms are accepted:
      (v, w[, name])        -- endpoints given positionally
      (descriptor[, value]) -- an EdgeDescriptor, with the optional
                               value in the second slot or passed as
                               value=

    Node ids and names are coerced to str.  The returned value is
    MISSING when the caller supplied none.
    """
    if isinstance(v, EdgeDescriptor):
        if name is not None or (w is not MISSING and value is not MISSING):
            raise TypeError(
                "an EdgeDescriptor call takes at most one extra argument (the value)"
            )
        return EdgeCall(
            str(v.v),
            str(v.w),
            _name(v.name),
            value if w is MISSING else w,
        )
    if w is MISSING:
        raise TypeError("edge calls need both endpoints or an EdgeDescriptor")
    return EdgeCall(str(v), str(w), _name(name), value)
