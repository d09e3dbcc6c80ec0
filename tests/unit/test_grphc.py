"""Unit tests for the .grphc writer and reader."""

import pytest

from graphic.errors import FormatError
from graphic.graph import GraphFamily, GrphcRenderer, StyleChange, StyleParams, generate, style
from graphic.graph.grphc import centred_positions, format_number, load_grphc, parse_grphc
from graphic.models import Colour

SAMPLE = """\
# saved graph
# two nodes
# one edge

2
0,0,0.2,0,1,1,1,0,0,0,v_{1},14
96,0,0.2,0,1,0.5,0,0,0,0
0,1,9.6,9.6,0,1,1,0,0
"""


def _styled(family=GraphFamily.CYCLE, count=4, second=None, **params):
    graph = generate(family, count, second)
    style(graph, StyleChange.ALL, StyleParams(**params))
    return graph


class TestWriter:
    """Test .grphc output."""

    def test_single_node(self):
        """Test the exact text for one default node."""
        text = GrphcRenderer().render(_styled(count=1))
        assert text == "1\n0,0,0.2,0,1,1,1,0,0,0\n"

    def test_labels_written_when_present(self):
        """Test that the label pair is appended only for labelled items."""
        graph = _styled(numbered_labels=True, edge_label="w", edge_label_size=9)
        lines = GrphcRenderer().render(graph).splitlines()
        assert lines[0] == "4"
        assert lines[1].endswith(",0,12")
        assert lines[5].startswith("0,1,")
        assert lines[5].endswith(",w,9")
        assert len(lines) == 1 + 4 + 4

    def test_positions_centred(self):
        """Test that saved coordinates are centred on the bounding box."""
        graph = _styled(GraphFamily.CYCLE, 3)
        positions = centred_positions(graph)
        xs = [x for x, _ in positions]
        ys = [y for _, y in positions]
        assert min(xs) + max(xs) == pytest.approx(0.0, abs=1e-9)
        assert min(ys) + max(ys) == pytest.approx(0.0, abs=1e-9)

    def test_format_number(self):
        """Test number formatting."""
        assert format_number(-0.0) == "0"
        assert format_number(1.0) == "1"
        assert format_number(0.2) == "0.2"
        assert format_number(1 / 3) == "0.3333333333"


class TestReader:
    """Test .grphc parsing."""

    def test_comments_blank_lines_and_optional_labels(self):
        """Test a file with comments, a blank line and mixed label forms."""
        graph = parse_grphc(SAMPLE)
        assert len(graph.nodes) == 2
        assert len(graph.edges) == 1
        first, second = graph.nodes
        assert first.label == "v_{1}"
        assert first.label_size == 14
        assert second.label == ""
        assert second.label_size == 12
        assert second.fill_colour == Colour(255, 128, 0)
        assert graph.edges[0].label == ""
        assert graph.edges[0].colour == Colour(255, 0, 0)
        assert graph.nodes[0].edge_ids == [0]
        assert graph.nodes[1].edge_ids == [0]

    def test_preview_normalised(self):
        """Test that loaded graphs can be restyled."""
        graph = parse_grphc(SAMPLE)
        assert [n.preview_pos for n in graph.nodes] == [(-0.5, 0.0), (0.5, 0.0)]
        style(graph, StyleChange.ALL, StyleParams(width=1.2, node_diameter=0.2))
        assert graph.nodes[1].pos == pytest.approx((48.0, 0.0))

    def test_label_with_commas(self):
        """Test that surplus fields are joined back into the label."""
        text = "1\n0,0,0.2,0,1,1,1,0,0,0,f(a,b),12\n"
        assert parse_grphc(text).nodes[0].label == "f(a,b)"

    def test_spaces_after_commas(self):
        """Test that padded numeric fields parse and label text is kept as is."""
        text = "2\n0, 0, 0.2, 0, 1, 1, 1, 0, 0, 0, x, 12\n1, 1, 0.2, 0, 1, 1, 1, 0, 0, 0\n0, 1, 1, 1, 0, 1, 0, 0, 0\n"
        graph = parse_grphc(text)
        assert graph.nodes[0].label == " x"
        assert graph.nodes[1].pos == (1.0, 1.0)

    @pytest.mark.parametrize("text,line,reason", [
        ("abc\n", 1, "bad node count"),
        ("# header\n2\n0,0,0.2,0,1,1,1,0,0,0\n", 2, "expected 2 node rows"),
        ("1\n0,0,0.2,0,1,1,1,0,0\n", 2, "node row has 9 fields"),
        ("1\n0,0,0.2,0,1,1,1,0,0,0,x\n", 2, "node row has 11 fields"),
        ("1\n0,zero,0.2,0,1,1,1,0,0,0\n", 2, "bad number 'zero'"),
        ("1\n0,0,0,0,1,1,1,0,0,0\n", 2, "diameter must be > 0"),
        ("2\n0,0,0.2,0,1,1,1,0,0,0\n1,1,0.2,0,1,1,1,0,0,0\n0,5,1,1,0,1,0,0,0\n", 4, "out of range"),
        ("2\n0,0,0.2,0,1,1,1,0,0,0\n1,1,0.2,0,1,1,1,0,0,0\n1,1,1,1,0,1,0,0,0\n", 4, "itself"),
        ("2\n0,0,0.2,0,1,1,1,0,0,0\n1,1,0.2,0,1,1,1,0,0,0\n0,1,1,1,0,1,0,0\n", 4, "edge row has 8 fields"),
        ("1\n0,0,0.2,0,nan,1,1,0,0,0\n", 2, "bad number 'nan'"),
        ("1\n0,0,0.2,0,1,inf,1,0,0,0\n", 2, "bad number 'inf'"),
        ("1\n0,0,-inf,0,1,1,1,0,0,0\n", 2, "bad number '-inf'"),
        ("1\n0,0,nan,0,1,1,1,0,0,0\n", 2, "bad number 'nan'"),
        ("2\n0,0,0.2,0,1,1,1,0,0,0\n1,1,0.2,0,1,1,1,0,0,0\n0,1,1,1,0,inf,0,0,0\n", 4, "bad number 'inf'"),
        ("-1\n", 1, "node count must be >= 0"),
        ("", 1, "missing node count"),
    ])
    def test_format_errors(self, text, line, reason):
        """Test that malformed files raise FormatError with the line number."""
        with pytest.raises(FormatError) as excinfo:
            parse_grphc(text, source="bad.grphc")
        assert excinfo.value.line == line
        assert reason in excinfo.value.reason
        assert str(excinfo.value).startswith(f"bad.grphc:{line}:")

    def test_empty_graph(self):
        """Test that a zero node file gives an empty graph."""
        graph = parse_grphc("0\n")
        assert graph.nodes == []
        assert graph.edges == []


class TestRoundTrip:
    """Test writing then reading a graph."""

    def test_cycle_round_trip(self):
        """Test that coordinates, edges, colours and labels survive."""
        graph = _styled(numbered_labels=True, node_fill=Colour(10, 200, 30), edge_label="e")
        text = GrphcRenderer().render(graph)
        loaded = parse_grphc(text)

        assert len(loaded.nodes) == 4
        for (x, y), node in zip(centred_positions(graph), loaded.nodes):
            assert node.pos[0] == pytest.approx(x, abs=1e-4)
            assert node.pos[1] == pytest.approx(y, abs=1e-4)
            assert node.fill_colour == Colour(10, 200, 30)
        original_edges = {(low, high) for low, high, _ in graph.undirected_edges()}
        assert {(e.source, e.dest) for e in loaded.edges} == original_edges
        assert [n.label for n in loaded.nodes] == ["0", "1", "2", "3"]
        assert all(e.label == "e" for e in loaded.edges)

    def test_round_trip_is_stable(self):
        """Test that a loaded graph writes back identically."""
        text = GrphcRenderer().render(_styled(top_label="p", edge_label="e"))
        assert GrphcRenderer().render(parse_grphc(text)) == text

    def test_load_from_file(self, tmp_path):
        """Test loading through the file system."""
        path = tmp_path / "sample.grphc"
        path.write_text(SAMPLE, encoding="utf-8")
        graph = load_grphc(path)
        assert len(graph.nodes) == 2

    def test_label_whitespace_round_trip(self):
        """Test that leading spaces in labels are preserved."""
        graph = _styled(count=2, edge_label=" w")
        graph.nodes[0].label = " x"
        loaded = parse_grphc(GrphcRenderer().render(graph))
        assert loaded.nodes[0].label == " x"
        assert loaded.edges[0].label == " w"

    def test_load_invalid_utf8(self, tmp_path):
        """Test that undecodable bytes raise FormatError at their line."""
        path = tmp_path / "latin1.grphc"
        path.write_bytes(b"# saved\n1\n0,0,0.2,0,1,1,1,0,0,0,caf\xe9,12\n")
        with pytest.raises(FormatError) as excinfo:
            load_grphc(path)
        assert excinfo.value.line == 3
        assert "UTF-8" in excinfo.value.reason

    def test_load_missing_file(self, tmp_path):
        """Test that an unreadable file raises OSError."""
        with pytest.raises(OSError):
            load_grphc(tmp_path / "missing.grphc")
