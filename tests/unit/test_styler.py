"""Unit tests for the graph styler."""

import math

import pytest

from graphic.config import DisplayConfig
from graphic.graph import GraphFamily, GrphcRenderer, StyleChange, StyleParams, generate, style
from graphic.markup import to_html
from graphic.models import Colour


class TestGeometry:
    """Test mapping preview coordinates to drawing pixels."""

    def test_cycle_four_positions(self):
        """Test positions of a 2in square cycle with 0.2in nodes."""
        graph = generate(GraphFamily.CYCLE, 4)
        style(graph, StyleChange.ALL, StyleParams(width=2, height=2, node_diameter=0.2))
        scale = (2 - 0.2) * 96
        expected = [(0, -0.5), (0.5, 0), (0, 0.5), (-0.5, 0)]
        for node, (px, py) in zip(graph.nodes, expected):
            assert node.pos[0] == pytest.approx(px * scale, abs=1e-9)
            assert node.pos[1] == pytest.approx(py * scale, abs=1e-9)

    def test_edge_radii_follow_node_size(self):
        """Test that edges stop at the node rims."""
        graph = generate(GraphFamily.CYCLE, 4)
        style(graph, StyleChange.ALL, StyleParams(node_diameter=0.2))
        for edge in graph.edges:
            assert edge.source_radius == pytest.approx(9.6)
            assert edge.dest_radius == pytest.approx(9.6)
        edge = graph.edges[0]
        source = graph.nodes[edge.source].pos
        assert math.dist(edge.source_point, source) == pytest.approx(9.6)

    def test_petersen_outer_radius(self):
        """Test the outer ring radius of a 3in Petersen graph."""
        graph = generate(GraphFamily.PETERSEN, 5, 2)
        style(graph, StyleChange.ALL, StyleParams(width=3, height=3, node_diameter=0.3))
        outer, _ = graph.roles.double_cycle
        for index in outer:
            assert math.hypot(*graph.nodes[index].pos) == pytest.approx((3 - 0.3) * 96 / 2)

    def test_display_resolution(self):
        """Test that the display DPI scales each axis."""
        graph = generate(GraphFamily.PATH, 2)
        style(graph, StyleChange.ALL, StyleParams(width=1.2, node_diameter=0.2),
              DisplayConfig(x_dpi=100, y_dpi=50))
        assert graph.nodes[1].pos[0] == pytest.approx(50.0)

    def test_minimum_extent(self):
        """Test that node diameters larger than the drawing still spread nodes."""
        graph = generate(GraphFamily.PATH, 2)
        style(graph, StyleChange.ALL, StyleParams(width=0.1, node_diameter=0.5))
        assert graph.nodes[1].pos[0] == pytest.approx(0.5 * 0.1 * 96)

    def test_width_change_only_moves_nodes(self):
        """Test that a width change leaves colours alone."""
        graph = generate(GraphFamily.PATH, 2)
        style(graph, StyleChange.ALL, StyleParams())
        style(graph, StyleChange.GRAPH_WIDTH, StyleParams(width=4.2, node_fill=Colour(1, 2, 3)))
        assert graph.nodes[1].pos[0] == pytest.approx(0.5 * 4.0 * 96)
        assert graph.nodes[1].fill_colour == Colour(255, 255, 255)


class TestLabels:
    """Test the labelling policy."""

    def test_numbered_labels(self):
        """Test numbering in insertion order."""
        graph = generate(GraphFamily.CYCLE, 4)
        style(graph, StyleChange.ALL, StyleParams(numbered_labels=True))
        assert [n.label for n in graph.nodes] == ["0", "1", "2", "3"]

    def test_numbered_labels_start(self):
        """Test a custom first number."""
        graph = generate(GraphFamily.CYCLE, 3)
        style(graph, StyleChange.ALL, StyleParams(numbered_labels=True))
        style(graph, StyleChange.LABEL_START, StyleParams(numbered_labels=True, label_start=5))
        assert [n.label for n in graph.nodes] == ["5", "6", "7"]

    def test_bipartite_prefixes(self):
        """Test separate prefixes for the two rows."""
        graph = generate(GraphFamily.BIPARTITE, 3, 2)
        style(graph, StyleChange.ALL, StyleParams(top_label="u", bottom_label="v"))
        assert [n.label for n in graph.nodes] == ["u_{0}", "u_{1}", "u_{2}", "v_{0}", "v_{1}"]
        assert len(graph.edges) == 6
        html = to_html(graph.nodes[0].label)
        assert html.startswith('<font face="cmmi10">u</font><sub>')
        assert '<font face="cmr10">0</font>' in html

    def test_bipartite_single_prefix(self):
        """Test that both rows share one prefix with their own counters."""
        graph = generate(GraphFamily.BIPARTITE, 3, 2)
        style(graph, StyleChange.ALL, StyleParams(top_label="w"))
        assert [n.label for n in graph.nodes] == ["w_{0}", "w_{1}", "w_{2}", "w_{0}", "w_{1}"]

    def test_prefix_labels(self):
        """Test a prefix on a non-bipartite graph."""
        graph = generate(GraphFamily.PATH, 3)
        style(graph, StyleChange.ALL, StyleParams(top_label="x", bottom_label="ignored"))
        assert [n.label for n in graph.nodes] == ["x_{0}", "x_{1}", "x_{2}"]

    def test_labels_cleared(self):
        """Test that labels are cleared without numbers or prefixes."""
        graph = generate(GraphFamily.PATH, 3)
        style(graph, StyleChange.ALL, StyleParams(numbered_labels=True))
        style(graph, StyleChange.NUMBER_LABELS, StyleParams())
        assert [n.label for n in graph.nodes] == ["", "", ""]


class TestAttributes:
    """Test individual style changes."""

    def test_fill_change_only(self):
        """Test that a fill change touches nothing else."""
        graph = generate(GraphFamily.CYCLE, 3)
        style(graph, StyleChange.ALL, StyleParams())
        style(graph, StyleChange.NODE_FILL, StyleParams(node_fill=Colour(255, 0, 0), node_diameter=1.0))
        assert all(n.fill_colour == Colour(255, 0, 0) for n in graph.nodes)
        assert all(n.diameter == 0.2 for n in graph.nodes)

    def test_edge_attributes(self):
        """Test edge width, colour and label."""
        graph = generate(GraphFamily.PATH, 3)
        params = StyleParams(edge_width=2.5, edge_colour=Colour(0, 0, 255), edge_label="w",
                             edge_label_size=0)
        style(graph, StyleChange.ALL, params)
        for edge in graph.edges:
            assert edge.pen_width == 2.5
            assert edge.colour == Colour(0, 0, 255)
            assert edge.label == "w"
            assert edge.label_size == 1.0

    def test_rotation(self):
        """Test that rotation is applied once and keeps text upright."""
        graph = generate(GraphFamily.CYCLE, 4)
        params = StyleParams(rotation=90)
        style(graph, StyleChange.ALL, params)
        style(graph, StyleChange.ROTATION, params)
        assert graph.rotation_degrees == pytest.approx(-90)
        assert all(n.rotation_degrees == pytest.approx(90) for n in graph.nodes)

    def test_style_accepts_change_value(self):
        """Test that changes can be passed by value."""
        graph = generate(GraphFamily.CYCLE, 3)
        style(graph, "node_outline", StyleParams(node_outline=Colour(0, 255, 0)))
        assert graph.nodes[0].outline_colour == Colour(0, 255, 0)

    def test_idempotent(self):
        """Test that styling twice serializes like styling once."""
        params = StyleParams(width=3, height=2, numbered_labels=True, rotation=30,
                             edge_label="e", node_fill=Colour(10, 20, 30))
        once = generate(GraphFamily.WHEEL, 7)
        style(once, StyleChange.ALL, params)
        twice = generate(GraphFamily.WHEEL, 7)
        style(twice, StyleChange.ALL, params)
        style(twice, StyleChange.ALL, params)
        renderer = GrphcRenderer()
        assert renderer.render(once) == renderer.render(twice)
