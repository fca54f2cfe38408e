"""Command that builds a sample graph and prints its analyses."""

from __future__ import annotations

import argparse

from .graph import Graph, UnknownNodeError

_DEMO_NODES = ("a", "b", "c", "d", "e", "f")
_DEMO_EDGES = (
    ("a", "b", 7),
    ("a", "c", 4),
    ("b", "c", 4),
    ("b", "e", 2),
    ("c", "e", 8),
    ("c", "d", 4),
    ("d", "f", 12),
    ("e", "d", 4),
    ("e", "f", 5),
)


def build_demo_graph() -> Graph:
    """Return the six-node sample graph."""
    graph = Graph()
    for node_id in _DEMO_NODES:
        graph.add_node(node_id)
    for source, target, weight in _DEMO_EDGES:
        graph.add_edge(source, target, weight)
    return graph


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="digraphkit",
        description="Run shortest paths, traversal and flow on a sample graph.",
    )
    parser.add_argument("--dot", default="graph.dot", help="where to write the dot file")
    parser.add_argument("--pdf", default="graph.pdf", help="where to render the PDF")
    parser.add_argument(
        "--no-render", action="store_true", help="write the dot file without running Graphviz"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    graph = build_demo_graph()
    try:
        for node_id, distance in graph.shortest_paths("a").items():
            print(node_id, distance)
        graph.dump(args.dot, args.pdf, render=not args.no_render)
        for node in graph.rpo("a"):
            print(node.node_id, end=" ")
        print(graph.max_flow("a", "f"))
    except (UnknownNodeError, ValueError, OSError) as error:
        print(error)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())