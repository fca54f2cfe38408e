"""Graph vertices and the weighted directed edges that join them."""

from __future__ import annotations

import weakref


class Edge:
    """A weighted directed edge.

    The edge refers to its endpoints weakly: once a node is gone, the
    corresponding endpoint reads as ``None``.
    """

    def __init__(self, source: Node, target: Node, weight: int = 0) -> None:
        if weight < 0:
            raise ValueError(f"edge weight must be non-negative, got {weight}")
        self._source = weakref.ref(source)
        self._target = weakref.ref(target)
        self.weight = weight

    @property
    def source(self) -> Node | None:
        """The node the edge leaves, or ``None`` if it no longer exists."""
        return self._source()

    @property
    def target(self) -> Node | None:
        """The node the edge enters, or ``None`` if it no longer exists."""
        return self._target()

    def matches(self, from_id: str, to_id: str) -> bool:
        """Whether the edge runs from the node ``from_id`` to the node ``to_id``."""
        source, target = self.source, self.target
        if source is None or target is None:
            return False
        return source.node_id == from_id and target.node_id == to_id

    def __repr__(self) -> str:
        source, target = self.source, self.target
        from_id = source.node_id if source is not None else None
        to_id = target.node_id if target is not None else None
        return f"Edge({from_id!r} -> {to_id!r}, weight={self.weight})"


class Node:
    """A named vertex that owns its incoming and outgoing edges."""

    def __init__(self, node_id: str) -> None:
        self.node_id = node_id
        self._in_edges: list[Edge] = []
        self._out_edges: list[Edge] = []

    @property
    def in_edges(self) -> tuple[Edge, ...]:
        """Edges entering this node, in the order they were added."""
        return tuple(self._in_edges)

    @property
    def out_edges(self) -> tuple[Edge, ...]:
        """Edges leaving this node, in the order they were added."""
        return tuple(self._out_edges)

    def add_in_edge(self, edge: Edge) -> None:
        self._in_edges.append(edge)

    def add_out_edge(self, edge: Edge) -> None:
        self._out_edges.append(edge)

    def remove_in_edge(self, edge: Edge) -> None:
        """Drop every occurrence of ``edge`` from the incoming edges."""
        self._in_edges = [e for e in self._in_edges if e is not edge]

    def remove_out_edge(self, edge: Edge) -> None:
        """Drop every occurrence of ``edge`` from the outgoing edges."""
        self._out_edges = [e for e in self._out_edges if e is not edge]

    def clear_edges(self) -> None:
        """Detach this node from all its edges, on both ends of each edge."""
        incoming, outgoing = self._in_edges, self._out_edges
        self._in_edges, self._out_edges = [], []

        for edge in incoming:
            source = edge.source
            if source is not None:
                source.remove_out_edge(edge)

        for edge in outgoing:
            target = edge.target
            if target is not None:
                target.remove_in_edge(edge)

    def __repr__(self) -> str:
        return f"Node({self.node_id!r})"