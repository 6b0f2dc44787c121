import pytest

from cursorkit.bfsgraph import Graph, GraphError
from cursorkit.findpath import find_paths, main

SAMPLE = "4\n1 2\n2 3\n0 0\n1 3\n1 4\n3 3\n0 0\n"


def test_output_starts_with_graph():
    g = Graph(4)
    g.add_edge(1, 2)
    g.add_edge(2, 3)
    assert find_paths(SAMPLE).startswith(str(g) + "\n")


def test_reachable_block():
    out = find_paths(SAMPLE)
    assert "The distance from 1 to 3 is 2\nA shortest 1-3 path is: 1 2 3\n\n" in out


def test_unreachable_block():
    out = find_paths(SAMPLE)
    assert "The distance from 1 to 4 is infinity\nNo 1-4 path exists\n\n" in out


def test_self_query_block():
    out = find_paths(SAMPLE)
    assert "A shortest 3-3 path is: 3\n\n" in out


def test_one_block_per_query():
    out = find_paths(SAMPLE)
    assert out.count("The distance from") == 3
    assert out.endswith("\n\n")


def test_pairs_may_share_a_line():
    one_per_line = "3\n1 2\n2 3\n0 0\n1 3\n3 1\n0 0\n"
    shared = "3\n1 2 2 3\n0 0\n1 3 3 1 0 0\n"
    assert find_paths(shared) == find_paths(one_per_line)


def test_queries_after_terminator_are_ignored():
    assert find_paths(SAMPLE + "1 2\n") == find_paths(SAMPLE)


def test_empty_text_raises():
    with pytest.raises(ValueError):
        find_paths("")


def test_invalid_vertex_raises():
    with pytest.raises(GraphError):
        find_paths("2\n1 5\n0 0\n")


def test_main_writes_report(tmp_path):
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    src.write_text(SAMPLE)
    assert main([str(src), str(dst)]) == 0
    assert dst.read_text() == find_paths(SAMPLE)


def test_main_empty_file(tmp_path, capsys):
    src = tmp_path / "in.txt"
    src.write_text("")
    assert main([str(src), str(tmp_path / "out.txt")]) == 1
    assert "Empty file is unable to be read" in capsys.readouterr().out


def test_main_usage(capsys):
    assert main(["only-one"]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_missing_input(tmp_path, capsys):
    assert main([str(tmp_path / "missing"), str(tmp_path / "out.txt")]) == 1
    assert "Unable to open file" in capsys.readouterr().out


def test_main_graph_error(tmp_path, capsys):
    src = tmp_path / "in.txt"
    src.write_text("2\n1 7\n0 0\n")
    assert main([str(src), str(tmp_path / "out.txt")]) == 1
    assert "Graph Error" in capsys.readouterr().err