"""Synchronous mutation notifications.

The graph owns one Notifier and calls emit() after each mutation has
been fully applied.  Handlers run in registration order on the caller's
thread; an exception raised by a handler propagates out of the mutator
that triggered it.

Payloads (positional):
    set_node     (node, value[, True])
    remove_node  (node,)
    set_edge     (edge, value[, True])
    remove_edge  (edge,)

The trailing True is passed only when an existing entity was updated.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable

log = logging.getLogger(__name__)

Handler = Callable[..., Any]


class GraphEvent(Enum):
    SET_NODE = "set_node"
    REMOVE_NODE = "remove_node"
    SET_EDGE = "set_edge"
    REMOVE_EDGE = "remove_edge"


def _as_event(event: GraphEvent | str) -> GraphEvent:
    if isinstance(event, GraphEvent):
        return event
    try:
        return GraphEvent(event)
    except ValueError:
        raise ValueError(f"Unknown graph event {event!r}") from None


class _Once:
    __slots__ = ("handler",)

    def __init__(self, handler: Handler) -> None:
        self.handler = handler

    def __call__(self, *args: Any) -> Any:
        return self.handler(*args)


class Notifier:
    """Per-graph listener registry."""

    __slots__ = ("_listeners",)

    def __init__(self) -> None:
        self._listeners: dict[GraphEvent, list[Handler]] = {
            event: [] for event in GraphEvent
        }

    def on(self, event: GraphEvent | str, handler: Handler) -> None:
        self._listeners[_as_event(event)].append(handler)

    def once(self, event: GraphEvent | str, handler: Handler) -> None:
        """Register *handler* for the next *event* only."""
        self._listeners[_as_event(event)].append(_Once(handler))

    def off(self, event: GraphEvent | str, handler: Handler) -> None:
        """Remove the first registration of *handler*; no-op if absent."""
        listeners = self._listeners[_as_event(event)]
        for i, h in enumerate(listeners):
            if h is handler or (isinstance(h, _Once) and h.handler is handler):
                del listeners[i]
                return

    def listener_count(self, event: GraphEvent | str) -> int:
        return len(self._listeners[_as_event(event)])

    def emit(self, event: GraphEvent, *args: Any) -> None:
        listeners = self._listeners[event]
        if not listeners:
            return
        log.debug("Dispatching %s to %d listener(s)", event.value, len(listeners))
        # snapshot: handlers may unregister themselves
        for handler in tuple(listeners):
            if isinstance(handler, _Once):
                self.off(event, handler)
            handler(*args)
