"""In-memory graph with adjacency indices.

One Graph class serves every combination of the three modes
(directed/undirected, simple/multigraph, flat/compound).  The modes
share a single representation thanks to the edge identity scheme in
graph.edge_id: an undirected edge is stored once, under its canonical
endpoint order, and a multigraph edge carries its name in its key.

Storage, all keyed by node id or edge key:

    _nodes      node -> value                (source of truth for existence)
    _edges      key  -> value
    _edge_objs  key  -> EdgeDescriptor
    _in_edges   node -> {key: EdgeDescriptor}   edges whose w is node
    _out_edges  node -> {key: EdgeDescriptor}   edges whose v is node
    _preds      node -> {neighbor: count}
    _succs      node -> {neighbor: count}

The counters record how many parallel edges join a pair, so a neighbor
disappears from predecessors()/successors() only when its last edge is
removed.

Every query that returns a sequence returns a fresh generator.  Do not
mutate the graph while one is live; take a list() first.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator

from graphcore_lite.domain.options import GraphOptions
from graphcore_lite.domain.types import EdgeKey, NodeId
from graphcore_lite.graph.edge_id import (
    MISSING,
    EdgeCall,
    EdgeDescriptor,
    edge_descriptor,
    edge_key,
    resolve_edge_call,
)
from graphcore_lite.graph.errors import InvalidMultiEdgeError, NotCompoundError
from graphcore_lite.graph.events import GraphEvent, Handler, Notifier
from graphcore_lite.graph.hierarchy import ROOT, Hierarchy

log = logging.getLogger(__name__)


def _increment(counts: dict[NodeId, int], key: NodeId) -> None:
    counts[key] = counts.get(key, 0) + 1


def _decrement(counts: dict[NodeId, int], key: NodeId) -> None:
    n = counts[key]
    if n > 1:
        counts[key] = n - 1
    else:
        del counts[key]


class Graph:
    """Directed or undirected, simple or multi, flat or compound graph.

    Args:
        directed: edges are ordered v -> w (default True)
        multigraph: allow several named edges per pair (default False)
        compound: enable set_parent/parent/children (default False)

    Mutators return the graph so calls can be chained:

        g = Graph().set_node("a", 1).set_edge("a", "b")
    """

    __slots__ = (
        "options",
        "events",
        "_nodes",
        "_edges",
        "_edge_objs",
        "_in_edges",
        "_out_edges",
        "_preds",
        "_succs",
        "_hierarchy",
    )

    def __init__(
        self,
        *,
        directed: bool = True,
        multigraph: bool = False,
        compound: bool = False,
    ) -> None:
        self.options = GraphOptions(
            directed=directed, multigraph=multigraph, compound=compound
        )
        self.events = Notifier()

        self._nodes: dict[NodeId, Any] = {}
        self._edges: dict[EdgeKey, Any] = {}
        self._edge_objs: dict[EdgeKey, EdgeDescriptor] = {}

        self._in_edges: dict[NodeId, dict[EdgeKey, EdgeDescriptor]] = {}
        self._out_edges: dict[NodeId, dict[EdgeKey, EdgeDescriptor]] = {}
        self._preds: dict[NodeId, dict[NodeId, int]] = {}
        self._succs: dict[NodeId, dict[NodeId, int]] = {}

        self._hierarchy: Hierarchy | None = Hierarchy() if compound else None

    @classmethod
    def from_options(cls, options: GraphOptions) -> Graph:
        return cls(
            directed=options.directed,
            multigraph=options.multigraph,
            compound=options.compound,
        )

    # ---- mode ------------------------------------------------------------

    def is_directed(self) -> bool:
        return self.options.directed

    def is_multigraph(self) -> bool:
        return self.options.multigraph

    def is_compound(self) -> bool:
        return self.options.compound

    # ---- events ----------------------------------------------------------

    def on(self, event: GraphEvent | str, handler: Handler) -> Graph:
        """Call *handler* after every *event*; see graph.events for payloads."""
        self.events.on(event, handler)
        return self

    def once(self, event: GraphEvent | str, handler: Handler) -> Graph:
        self.events.once(event, handler)
        return self

    def off(self, event: GraphEvent | str, handler: Handler) -> Graph:
        self.events.off(event, handler)
        return self

    # ---- nodes -----------------------------------------------------------

    def set_node(self, node: Any, value: Any = None) -> Graph:
        """Create *node* or overwrite its value.

        Re-setting an existing node never touches its edges or parent.
        """
        node = str(node)
        if node in self._nodes:
            self._nodes[node] = value
            self.events.emit(GraphEvent.SET_NODE, node, value, True)
            return self

        self._nodes[node] = value
        if self._hierarchy is not None:
            self._hierarchy.add(node)
        self._in_edges[node] = {}
        self._out_edges[node] = {}
        self._preds[node] = {}
        self._succs[node] = {}
        self.events.emit(GraphEvent.SET_NODE, node, value)
        return self

    def node(self, node: Any) -> Any:
        """Value of *node*, or None if absent (use has_node to tell apart)."""
        return self._nodes.get(str(node))

    def has_node(self, node: Any) -> bool:
        return str(node) in self._nodes

    def remove_node(self, node: Any) -> Graph:
        """Remove *node* and every edge touching it.  No-op if absent.

        In a compound graph the node's direct children move up to the
        node's former parent.
        """
        node = str(node)
        if node not in self._nodes:
            return self

        incident = [*self._in_edges[node].values(), *self._out_edges[node].values()]
        if incident:
            log.debug("Removing %d edge(s) incident to %r", len(incident), node)
        for edge in incident:
            # a self-loop is listed twice; the second call is a no-op
            self.remove_edge(edge)

        del self._nodes[node]
        if self._hierarchy is not None:
            self._hierarchy.remove(node)
        del self._in_edges[node]
        del self._out_edges[node]
        del self._preds[node]
        del self._succs[node]
        self.events.emit(GraphEvent.REMOVE_NODE, node)
        return self

    def node_count(self) -> int:
        return len(self._nodes)

    def nodes(self) -> Iterator[NodeId]:
        """Node ids in insertion order."""
        yield from self._nodes

    def sources(self) -> Iterator[NodeId]:
        """Nodes with no in-edges."""
        for node in self._nodes:
            if not self._in_edges[node]:
                yield node

    def sinks(self) -> Iterator[NodeId]:
        """Nodes with no out-edges."""
        for node in self._nodes:
            if not self._out_edges[node]:
                yield node

    # ---- compound --------------------------------------------------------

    def set_parent(self, node: Any, parent: Any = None) -> Graph:
        """Make *parent* the parent of *node* (ROOT if *parent* is None).

        Both nodes are created if missing.  Raises NotCompoundError on a
        flat graph and CycleViolationError if *node* is *parent* or one
        of its ancestors; in either case nothing is changed.
        """
        node = str(node)
        if self._hierarchy is None:
            raise NotCompoundError(node)

        if parent is None:
            target: Any = ROOT
        else:
            parent = str(parent)
            self._hierarchy.check_parent(node, parent)
            self._ensure_node(parent)
            target = parent

        self._ensure_node(node)
        self._hierarchy.move(node, target)
        return self

    def parent(self, node: Any) -> NodeId | None:
        """Parent of *node*; None for top-level nodes and flat graphs."""
        if self._hierarchy is None:
            return None
        return self._hierarchy.parent(str(node))

    def children(self, node: Any = None) -> Iterator[NodeId]:
        """Direct children of *node*, or the top-level nodes if omitted.

        On a flat graph every node is top-level and no node has children.
        """
        if self._hierarchy is not None:
            yield from self._hierarchy.children(ROOT if node is None else str(node))
        elif node is None:
            yield from self._nodes

    # ---- adjacency -------------------------------------------------------

    def predecessors(self, node: Any) -> Iterator[NodeId]:
        """Distinct nodes with an edge into *node*."""
        yield from self._preds.get(str(node), ())

    def successors(self, node: Any) -> Iterator[NodeId]:
        """Distinct nodes *node* has an edge to."""
        yield from self._succs.get(str(node), ())

    def neighbors(self, node: Any) -> Iterator[NodeId]:
        """Predecessors, then successors not already yielded."""
        node = str(node)
        preds = self._preds.get(node)
        if preds is None:
            return
        yield from preds
        for succ in self._succs[node]:
            if succ not in preds:
                yield succ

    def is_leaf(self, node: Any) -> bool:
        """No successors (directed) or no neighbors at all (undirected)."""
        if self.is_directed():
            return next(self.successors(node), None) is None
        return next(self.neighbors(node), None) is None

    def in_degree(self, node: Any) -> int:
        return len(self._in_edges.get(str(node), ()))

    def out_degree(self, node: Any) -> int:
        return len(self._out_edges.get(str(node), ()))

    # ---- edges -----------------------------------------------------------

    def set_edge(
        self,
        v: Any,
        w: Any = MISSING,
        value: Any = MISSING,
        name: Any = None,
    ) -> Graph:
        """Create the edge (v, w, name) or update its value.

        Also accepts an EdgeDescriptor as *v*, with the value as the
        second argument: ``g.set_edge(edge, "label")``.

        On an existing edge the value is replaced only when one was
        passed, so ``set_edge(v, w)`` is a no-op touch while
        ``set_edge(v, w, None)`` clears the value.  A new edge creates
        any missing endpoint.  Raises InvalidMultiEdgeError for a named
        edge on a graph that is not a multigraph.
        """
        call = resolve_edge_call(v, w, name, value)
        directed = self.is_directed()
        key = edge_key(directed, call.v, call.w, call.name)

        if key in self._edge_objs:
            if call.value is not MISSING:
                self._edges[key] = call.value
                self.events.emit(
                    GraphEvent.SET_EDGE, self._edge_objs[key], call.value, True
                )
            return self

        if call.name is not None and not self.is_multigraph():
            raise InvalidMultiEdgeError(call.v, call.w, call.name)

        self._ensure_node(call.v)
        self._ensure_node(call.w)

        stored = None if call.value is MISSING else call.value
        edge = edge_descriptor(directed, call.v, call.w, call.name)
        self._edges[key] = stored
        self._edge_objs[key] = edge

        _increment(self._preds[edge.w], edge.v)
        _increment(self._succs[edge.v], edge.w)
        self._in_edges[edge.w][key] = edge
        self._out_edges[edge.v][key] = edge

        self.events.emit(GraphEvent.SET_EDGE, edge, stored)
        return self

    def set_path(self, path: Iterable[Any], value: Any = MISSING) -> Graph:
        """set_edge on each consecutive pair of *path*, sharing *value*.

        Fewer than two nodes creates no edges.
        """
        it = iter(path)
        prev = next(it, MISSING)
        for cur in it:
            self.set_edge(prev, cur, value)
            prev = cur
        return self

    def edge(self, v: Any, w: Any = MISSING, name: Any = None) -> Any:
        """Value of the edge, or None if absent."""
        return self._edges.get(self._key(resolve_edge_call(v, w, name)))

    def has_edge(self, v: Any, w: Any = MISSING, name: Any = None) -> bool:
        return self._key(resolve_edge_call(v, w, name)) in self._edges

    def remove_edge(self, v: Any, w: Any = MISSING, name: Any = None) -> Graph:
        """Remove the edge; its endpoints stay.  No-op if absent."""
        key = self._key(resolve_edge_call(v, w, name))
        edge = self._edge_objs.pop(key, None)
        if edge is None:
            return self

        del self._edges[key]
        _decrement(self._preds[edge.w], edge.v)
        _decrement(self._succs[edge.v], edge.w)
        del self._in_edges[edge.w][key]
        del self._out_edges[edge.v][key]
        self.events.emit(GraphEvent.REMOVE_EDGE, edge)
        return self

    def edge_count(self) -> int:
        return len(self._edges)

    def edges(self) -> Iterator[EdgeDescriptor]:
        """All edge descriptors in insertion order."""
        yield from self._edge_objs.values()

    def in_edges(self, v: Any, u: Any = None) -> Iterator[EdgeDescriptor]:
        """Edges stored as pointing at *v*, optionally only those from *u*."""
        edges = self._in_edges.get(str(v))
        if edges is None:
            return
        if u is None:
            yield from edges.values()
            return
        u = str(u)
        for edge in edges.values():
            if edge.v == u:
                yield edge

    def out_edges(self, v: Any, w: Any = None) -> Iterator[EdgeDescriptor]:
        """Edges stored as leaving *v*, optionally only those to *w*."""
        edges = self._out_edges.get(str(v))
        if edges is None:
            return
        if w is None:
            yield from edges.values()
            return
        w = str(w)
        for edge in edges.values():
            if edge.w == w:
                yield edge

    def node_edges(self, v: Any, w: Any = None) -> Iterator[EdgeDescriptor]:
        """Every edge incident to *v* (in-edges first), optionally only
        those that also touch *w*.

        This is the view to use on undirected graphs, where an edge is
        filed under one endpoint's in-edges and the other's out-edges.
        A self-loop appears twice.
        """
        yield from self.in_edges(v, w)
        yield from self.out_edges(v, w)

    def _ensure_node(self, node: NodeId) -> None:
        if node not in self._nodes:
            self.set_node(node)

    def _key(self, call: EdgeCall) -> EdgeKey:
        if call.value is not MISSING:
            raise TypeError("an EdgeDescriptor query takes no extra arguments")
        return edge_key(self.is_directed(), call.v, call.w, call.name)

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, node: Any) -> bool:
        return self.has_node(node)

    def __len__(self) -> int:
        return self.node_count()

    def __repr__(self) -> str:
        o = self.options
        return (
            f"Graph(directed={o.directed}, multigraph={o.multigraph}, "
            f"compound={o.compound}, nodes={self.node_count()}, "
            f"edges={self.edge_count()})"
        )
