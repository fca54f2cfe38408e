# digraphkit

A small library for weighted directed graphs whose nodes are named by strings.

## Installation

```
pip install .
```

To run the tests, install the `test` extra:

```
pip install ".[test]"
pytest
```

## Modules

- `digraphkit.node`: `Node` and `Edge`.
- `digraphkit.graph`: `Graph`, `UnknownNodeError` and the `UNREACHABLE` constant.
- `digraphkit.cli`: the `digraphkit` command and `build_demo_graph()`.

## Usage

```python
from digraphkit.graph import Graph, UnknownNodeError, UNREACHABLE

graph = Graph()
for name in "abcdef":
    graph.add_node(name)            # False if the id is already taken

graph.add_edge("a", "b", 7)         # returns the new Edge
graph.add_edge("a", "c", 4)
graph.add_edge("b", "e", 2)
graph.add_edge("c", "d", 4)
graph.add_edge("e", "f", 5)

graph.contains_edge("a", "b")       # True
graph.get_edge("a", "b").weight     # 7

distances = graph.shortest_paths("a")   # {"a": 0, "b": 7, ...}
order = graph.rpo("a")                  # list of Node objects
flow = graph.max_flow("a", "f")

print(graph.to_dot())
graph.dump("graph.dot", "graph.pdf", render=False)
```

### Nodes and edges

- `Graph.add_node(node_id)` returns `False` if a node with that id exists.
- `Graph.remove_node(node_id)` removes the node and every edge touching it.
- `Graph.add_edge(from_id, to_id, weight)` returns the new `Edge`. A negative
  weight raises `ValueError`. Several edges may join the same pair of nodes.
- `Graph.remove_edge(from_id, to_id)` removes the first matching edge and
  returns `True`, or returns `False` when the two nodes exist but are not
  joined.
- `Graph.get_node`, `Graph.get_edge` return `None` when nothing matches;
  `Graph.contains_node`, `Graph.contains_edge` return booleans.

Naming a node the graph does not have, in any of the edge or removal methods
or in the algorithms, raises `UnknownNodeError` (a `LookupError`); its
`node_ids` attribute holds the ids that were missing.

A `Node` has `node_id`, `in_edges` and `out_edges` (tuples, in insertion
order). An `Edge` has `weight`, `source` and `target`; it refers to its
endpoints weakly, so an endpoint reads as `None` once its node is gone.

### Algorithms

- `Graph.rpo(node_id)` walks depth-first from the start node and returns the
  nodes in the order they are discovered. A node is listed again each time it
  is reached from a node that is not yet expanded, so it may appear more than
  once.
- `Graph.shortest_paths(node_id)` runs Dijkstra's algorithm and returns a
  dict from every node id to its distance; nodes that cannot be reached get
  `UNREACHABLE` (`2**63 - 1`).
- `Graph.max_flow(start_id, end_id)` pushes flow along edges in a single
  depth-first sweep from the start node and returns the total flow entering
  the end node. It does not look for augmenting paths, so the result is an
  estimate rather than the true maximum flow.

Both traversals log a "Found loop" message at `INFO` level on the
`digraphkit.graph` logger when they meet an already expanded node.

### Graphviz output

`Graph.to_dot()` returns the graph as DOT text. `Graph.dump(dot_path="graph.dot",
pdf_path="graph.pdf", render=True)` writes that text to `dot_path` and returns
the path; with `render=True` it also runs Graphviz's `dot` command to produce
a PDF. If `dot` is not installed, a warning is logged and no PDF is made.

## Command line

```
digraphkit
digraphkit --dot out.dot --pdf out.pdf
digraphkit --no-render
```

The command builds a fixed six-node sample graph (`build_demo_graph()`),
prints the shortest distance from `a` to each node, writes the DOT file
(rendering it to PDF unless `--no-render` is given), then prints the
depth-first order from `a` followed by the flow from `a` to `f`.

## Limitations

- The command only runs on its built-in sample graph; there is no way to read
  a graph from a file or from standard input.
- Graphs are kept in memory only; apart from the DOT export there is no
  saving or loading.