from digraphkit.cli import build_demo_graph, main


def test_demo_graph_structure():
    graph = build_demo_graph()
    for node_id in "abcdef":
        assert graph.contains_node(node_id)
    assert graph.get_edge("a", "b").weight == 7
    assert graph.get_edge("d", "f").weight == 12
    assert graph.contains_edge("f", "a") is False
    total_out = sum(len(graph.get_node(n).out_edges) for n in "abcdef")
    assert total_out == 9


def test_demo_distances_are_consistent():
    graph = build_demo_graph()
    dist = graph.shortest_paths("a")
    assert dist["a"] == 0
    for node_id in "abcdef":
        for edge in graph.get_node(node_id).out_edges:
            assert dist[edge.target.node_id] <= dist[node_id] + edge.weight


def test_main_output(tmp_path, capsys):
    dot_file = tmp_path / "demo.dot"
    assert main(["--no-render", "--dot", str(dot_file), "--pdf", str(tmp_path / "demo.pdf")]) == 0
    lines = capsys.readouterr().out.splitlines()
    graph = build_demo_graph()

    distances = graph.shortest_paths("a")
    assert lines[: len(distances)] == [f"{n} {d}" for n, d in distances.items()]

    tokens = lines[len(distances)].split()
    assert tokens[:-1] == [node.node_id for node in graph.rpo("a")]
    assert int(tokens[-1]) == graph.max_flow("a", "f")
    assert len(lines) == len(distances) + 1


def test_main_writes_dot_file(tmp_path, capsys):
    dot_file = tmp_path / "demo.dot"
    main(["--no-render", "--dot", str(dot_file)])
    capsys.readouterr()
    assert dot_file.read_text() == build_demo_graph().to_dot()


def test_main_reports_write_failure(tmp_path, capsys):
    bad_path = tmp_path / "missing_dir" / "demo.dot"
    assert main(["--no-render", "--dot", str(bad_path)]) == 0
    out = capsys.readouterr().out
    assert "demo.dot" in out.splitlines()[-1]