"""Weighted directed graphs: traversal, shortest paths, a flow estimate and DOT export."""

__version__ = "0.1.0"
__all__ = ["cli", "graph", "node"]