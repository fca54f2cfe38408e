import gc

import pytest

from digraphkit.node import Edge, Node


def _connect(source, target, weight=1):
    edge = Edge(source, target, weight)
    source.add_out_edge(edge)
    target.add_in_edge(edge)
    return edge


def test_edge_endpoints_and_weight():
    a, b = Node("a"), Node("b")
    edge = Edge(a, b, 7)
    assert edge.source is a
    assert edge.target is b
    assert edge.weight == 7


def test_edge_default_weight_is_zero():
    edge = Edge(Node("a"), Node("b"))
    assert edge.weight == 0


def test_edge_rejects_negative_weight():
    with pytest.raises(ValueError):
        Edge(Node("a"), Node("b"), -1)


def test_edge_matches_by_ids():
    a, b = Node("a"), Node("b")
    edge = Edge(a, b, 1)
    assert edge.matches("a", "b") is True
    assert edge.matches("b", "a") is False
    assert edge.matches("a", "c") is False


def test_edge_endpoint_expires_with_node():
    a, b = Node("a"), Node("b")
    edge = Edge(a, b, 3)
    del a
    gc.collect()
    assert edge.source is None
    assert edge.target is b
    assert edge.matches("a", "b") is False


def test_node_keeps_edges_in_order():
    a, b, c = Node("a"), Node("b"), Node("c")
    first = _connect(a, b)
    second = _connect(a, c)
    assert a.out_edges == (first, second)
    assert b.in_edges == (first,)
    assert c.in_edges == (second,)
    assert a.in_edges == ()


def test_edge_views_are_snapshots():
    a, b = Node("a"), Node("b")
    edge = _connect(a, b)
    view = a.out_edges
    a.remove_out_edge(edge)
    assert view == (edge,)
    assert a.out_edges == ()


def test_remove_edge_drops_every_occurrence():
    a, b = Node("a"), Node("b")
    edge = Edge(a, b)
    other = Edge(a, b)
    a.add_out_edge(edge)
    a.add_out_edge(other)
    a.add_out_edge(edge)
    a.remove_out_edge(edge)
    assert a.out_edges == (other,)

    b.add_in_edge(edge)
    b.add_in_edge(edge)
    b.remove_in_edge(edge)
    assert b.in_edges == ()


def test_clear_edges_detaches_neighbours():
    a, b, c = Node("a"), Node("b"), Node("c")
    ab = _connect(a, b)
    bc = _connect(b, c)
    ca = _connect(c, a)
    b.clear_edges()
    assert b.in_edges == ()
    assert b.out_edges == ()
    assert a.out_edges == ()
    assert c.in_edges == ()
    assert c.out_edges == (ca,)
    assert a.in_edges == (ca,)
    assert ab not in a.out_edges and bc not in c.in_edges


def test_clear_edges_with_self_loop():
    a = Node("a")
    loop = _connect(a, a)
    assert a.in_edges == (loop,)
    a.clear_edges()
    assert a.in_edges == ()
    assert a.out_edges == ()