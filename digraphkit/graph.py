"""A weighted directed graph with traversal, shortest paths and flow."""

from __future__ import annotations

import heapq
import itertools
import logging
import subprocess
from os import PathLike
from pathlib import Path

from .node import Edge, Node

logger = logging.getLogger(__name__)

UNREACHABLE = 2**63 - 1
"""Distance reported for nodes that cannot be reached."""


class UnknownNodeError(LookupError):
    """Raised when an operation names a node that is not in the graph."""

    def __init__(self, *node_ids: str, kind: str = "") -> None:
        self.node_ids = node_ids
        noun = "nodes" if len(node_ids) > 1 else "node"
        prefix = f"Unknown {kind} {noun}" if kind else f"Unknown {noun}"
        super().__init__(f"{prefix} {' '.join(node_ids)}")


class Graph:
    """A directed graph whose nodes are identified by strings."""

    def __init__(self) -> None:
        self._nodes: dict[str, Node] = {}
        self._edges: list[Edge] = []

    # Nodes

    def add_node(self, node_id: str) -> bool:
        """Add a node; return ``False`` if one with that id already exists."""
        if node_id in self._nodes:
            return False
        self._nodes[node_id] = Node(node_id)
        return True

    def remove_node(self, node_id: str) -> None:
        """Remove a node together with every edge touching it."""
        node = self._nodes.pop(node_id, None)
        if node is None:
            raise UnknownNodeError(node_id)
        node.clear_edges()
        self._edges = [
            edge
            for edge in self._edges
            if edge.source is not node and edge.target is not node
        ]

    def get_node(self, node_id: str) -> Node | None:
        return self._nodes.get(node_id)

    def contains_node(self, node_id: str) -> bool:
        return node_id in self._nodes

    # Edges

    def _endpoints(self, from_id: str, to_id: str) -> tuple[Node, Node]:
        source = self._nodes.get(from_id)
        target = self._nodes.get(to_id)
        if source is None and target is None:
            raise UnknownNodeError(from_id, to_id)
        if source is None:
            raise UnknownNodeError(from_id)
        if target is None:
            raise UnknownNodeError(to_id)
        return source, target

    def add_edge(self, from_id: str, to_id: str, weight: int) -> Edge:
        """Join two existing nodes with a new edge and return it."""
        source, target = self._endpoints(from_id, to_id)
        edge = Edge(source, target, weight)
        source.add_out_edge(edge)
        target.add_in_edge(edge)
        self._edges.append(edge)
        return edge

    def remove_edge(self, from_id: str, to_id: str) -> bool:
        """Remove the first edge from ``from_id`` to ``to_id``.

        Returns ``False`` when the two nodes exist but are not joined.
        """
        source, target = self._endpoints(from_id, to_id)
        outgoing = next((e for e in source.out_edges if e.matches(from_id, to_id)), None)
        incoming = next((e for e in target.in_edges if e.matches(from_id, to_id)), None)
        if outgoing is None or incoming is None:
            return False
        self._edges.remove(outgoing)
        source.remove_out_edge(outgoing)
        target.remove_in_edge(incoming)
        return True

    def get_edge(self, from_id: str, to_id: str) -> Edge | None:
        return next((e for e in self._edges if e.matches(from_id, to_id)), None)

    def contains_edge(self, from_id: str, to_id: str) -> bool:
        return self.get_edge(from_id, to_id) is not None

    # Algorithms

    def _require(self, node_id: str, kind: str = "") -> Node:
        node = self._nodes.get(node_id)
        if node is None:
            raise UnknownNodeError(node_id, kind=kind)
        return node

    def rpo(self, node_id: str) -> list[Node]:
        """Depth-first order of the nodes reachable from ``node_id``.

        A node is listed each time it is discovered from a node that has not
        been expanded yet, so it can appear more than once.
        """
        start = self._require(node_id)
        traversal = [start]
        stack = [start]
        expanded: set[Node] = set()

        while stack:
            current = stack.pop()
            for edge in reversed(current.out_edges):
                target = edge.target
                if target not in expanded:
                    stack.append(target)
                    traversal.append(target)
                else:
                    logger.info("Found loop %s -> %s", start.node_id, current.node_id)
            expanded.add(current)

        return traversal

    def shortest_paths(self, node_id: str) -> dict[str, int]:
        """Distances from ``node_id`` to every node; unreachable ones get UNREACHABLE."""
        start = self._require(node_id)
        dist = {nid: UNREACHABLE for nid in self._nodes}
        dist[start.node_id] = 0
        tie = itertools.count()
        queue: list[tuple[int, int, Node]] = [(0, next(tie), start)]

        while queue:
            distance, _, current = heapq.heappop(queue)
            if distance > dist[current.node_id]:
                continue
            for edge in current.out_edges:
                target = edge.target
                candidate = distance + edge.weight
                if candidate < dist[target.node_id]:
                    dist[target.node_id] = candidate
                    heapq.heappush(queue, (candidate, next(tie), target))

        return dist

    def max_flow(self, start_id: str, end_id: str) -> int:
        """Flow pushed into ``end_id`` by a single depth-first sweep from ``start_id``."""
        start = self._require(start_id, kind="start")
        end = self._require(end_id, kind="end")

        stack = [start]
        bottleneck = [UNREACHABLE]
        expanded: set[Node] = set()
        forward: dict[Edge, int] = {}

        while stack:
            current = stack.pop()
            for edge in current.out_edges:
                target = edge.target
                pushed = forward.get(edge, 0)
                if target not in expanded and pushed < edge.weight:
                    delta = min(bottleneck[-1], edge.weight - pushed)
                    if delta > 0:
                        forward[edge] = pushed + delta
                    stack.append(target)
                    bottleneck.append(min(bottleneck[-1], edge.weight))
                else:
                    logger.info("Found loop %s -> %s", start.node_id, current.node_id)
            expanded.add(current)

        return sum(forward.get(edge, 0) for edge in end.in_edges)

    # Output

    def to_dot(self) -> str:
        """Describe the graph in Graphviz dot syntax."""
        lines = ["strict digraph GG {", "node [shape=circle];"]
        for node_id, node in self._nodes.items():
            lines.append(node_id)
            for edge in node.out_edges:
                lines.append(
                    f'  "{edge.source.node_id}" -> "{edge.target.node_id}"'
                    f'[label="{edge.weight}"];'
                )
        lines.append("}")
        return "\n".join(lines) + "\n"

    def dump(
        self,
        dot_path: str | PathLike[str] = "graph.dot",
        pdf_path: str | PathLike[str] = "graph.pdf",
        render: bool = True,
    ) -> Path:
        """Write the dot description and optionally render it to PDF with Graphviz."""
        path = Path(dot_path)
        path.write_text(self.to_dot())
        if render:
            try:
                subprocess.run(
                    ["dot", "-Tpdf", str(path), "-o", str(pdf_path)], check=False
                )
            except FileNotFoundError:
                logger.warning("Graphviz 'dot' not found; %s was not rendered", path)
        return path