"""Tests for dot export and vertex listing."""

from __future__ import annotations

import io

import pytest

from graphwalk import (
    GraphExportError,
    InvalidGraphError,
    bfs,
    dfs,
    export_dot,
    format_vertices,
    print_vertices,
)


def read_lines(path) -> list[str]:
    return path.read_text(encoding="utf-8").splitlines()


class TestExportDot:
    def test_undirected_pair_written_once(self, graph, tmp_path):
        graph.add_vertex(1)
        graph.add_vertex(2)
        graph.add_undirected(1, 2, 5)
        out = tmp_path / "pair.dot"

        assert export_dot(graph, out) == 1
        assert read_lines(out) == ["graph {", "\t1 -- 2 [label = 5];", "}"]

    def test_undirected_graph(self, undirected_graph, tmp_path):
        out = tmp_path / "graph.dot"
        count = export_dot(undirected_graph, out)
        lines = read_lines(out)
        assert count == 5
        assert lines[0] == "graph {"
        assert lines[-1] == "}"
        assert lines[1:-1] == [
            "\t1 -- 2 [label = 7];",
            "\t1 -- 4 [label = 1];",
            "\t2 -- 3 [label = 4];",
            "\t3 -- 5 [label = 2];",
            "\t4 -- 5 [label = 3];",
        ]

    def test_one_way_edges_written(self, diamond, tmp_path):
        out = tmp_path / "diamond.dot"
        assert export_dot(diamond, out) == 4
        assert "\t3 -- 4 [label = 9];" in read_lines(out)

    def test_marks_edges_exported(self, undirected_graph, tmp_path):
        export_dot(undirected_graph, tmp_path / "g.dot")
        assert all(e.exported for e in undirected_graph.edges())

    def test_repeated_export_is_identical(self, undirected_graph, tmp_path):
        first, second = tmp_path / "a.dot", tmp_path / "b.dot"
        export_dot(undirected_graph, first)
        export_dot(undirected_graph, second)
        assert first.read_text() == second.read_text()

    def test_empty_graph(self, graph, tmp_path):
        out = tmp_path / "empty.dot"
        assert export_dot(graph, out) == 0
        assert read_lines(out) == ["graph {", "}"]

    def test_unwritable_path(self, graph, tmp_path):
        with pytest.raises(GraphExportError):
            export_dot(graph, tmp_path / "missing" / "dir" / "g.dot")

    @pytest.mark.parametrize("bad", [None, "graph", 3])
    def test_invalid_graph_rejected(self, bad, tmp_path):
        with pytest.raises(InvalidGraphError):
            export_dot(bad, tmp_path / "g.dot")
        assert not (tmp_path / "g.dot").exists()


class TestVertexListing:
    def test_format_before_traversal(self, diamond):
        assert format_vertices(diamond)[0] == "vertex 1: distance=inf parent=- visited=False"

    def test_format_after_bfs(self, diamond):
        bfs(diamond, 1)
        assert format_vertices(diamond) == [
            "vertex 1: distance=0 parent=- visited=False",
            "vertex 2: distance=1 parent=1 visited=False",
            "vertex 3: distance=1 parent=1 visited=False",
            "vertex 4: distance=2 parent=2 visited=False",
        ]

    def test_print_vertices(self, diamond):
        buf = io.StringIO()
        print_vertices(diamond, file=buf)
        assert [line.split(":")[0] for line in buf.getvalue().splitlines()] == [
            "vertex 1", "vertex 2", "vertex 3", "vertex 4",
        ]

    def test_print_vertices_stdout(self, diamond, capsys):
        print_vertices(diamond)
        assert "vertex 4" in capsys.readouterr().out

    def test_released_graph(self, diamond):
        diamond.release()
        with pytest.raises(InvalidGraphError):
            format_vertices(diamond)

    @pytest.mark.parametrize("bad", [None, "graph", 3])
    def test_invalid_graph_rejected(self, bad):
        with pytest.raises(InvalidGraphError):
            format_vertices(bad)
        with pytest.raises(InvalidGraphError):
            print_vertices(bad, file=io.StringIO())

    def test_listing_after_dfs_shows_no_bfs_fields(self, diamond):
        bfs(diamond, 1)
        dfs(diamond, 4)
        assert format_vertices(diamond)[3] == "vertex 4: distance=inf parent=- visited=True"
