"""Apply StyleParams to a generated or loaded graph."""

import logging
from enum import Enum

from ..config import DisplayConfig, StyleParams
from ..models import Graph
from .families import GraphFamily

logger = logging.getLogger(__name__)

# Smallest centre-to-centre extent, in inches, a graph is drawn at.
MIN_EXTENT = 0.1


class StyleChange(str, Enum):
    """Which drawing attribute changed since the graph was last styled."""
    ALL = "all"
    NODE_SIZE = "node_size"
    NODE_FILL = "node_fill"
    NODE_OUTLINE = "node_outline"
    NODE_THICKNESS = "node_thickness"
    NODE_LABEL_1 = "node_label_1"
    NODE_LABEL_2 = "node_label_2"
    NUMBER_LABELS = "number_labels"
    NODE_LABEL_SIZE = "node_label_size"
    EDGE_SIZE = "edge_size"
    EDGE_LABEL = "edge_label"
    EDGE_LABEL_SIZE = "edge_label_size"
    EDGE_COLOUR = "edge_colour"
    ROTATION = "rotation"
    GRAPH_HEIGHT = "graph_height"
    GRAPH_WIDTH = "graph_width"
    LABEL_START = "label_start"


_GEOMETRY_CHANGES = {StyleChange.NODE_SIZE, StyleChange.GRAPH_WIDTH, StyleChange.GRAPH_HEIGHT}
_LABEL_CHANGES = {
    StyleChange.NODE_LABEL_1,
    StyleChange.NODE_LABEL_2,
    StyleChange.NUMBER_LABELS,
    StyleChange.LABEL_START,
}


def style(graph: Graph, change: StyleChange, params: StyleParams,
          display: DisplayConfig | None = None) -> Graph:
    """Apply the attributes named by ``change`` to every node and edge.

    ``StyleChange.ALL`` applies everything and is what callers use after
    generating or loading a graph. Styling the same graph twice with the
    same parameters leaves it unchanged.

    Args:
        graph: Graph to style in place.
        change: Attribute that changed.
        params: Style parameters.
        display: Screen resolution; defaults to 96 dpi.

    Returns:
        The same graph, for chaining.
    """
    if display is None:
        display = DisplayConfig()
    change = StyleChange(change)
    every = change == StyleChange.ALL

    if every or change == StyleChange.NODE_SIZE:
        for node in graph.nodes:
            node.diameter = params.node_diameter
    if every or change in _GEOMETRY_CHANGES:
        _place_nodes(graph, params, display)
    if every or change == StyleChange.NODE_FILL:
        for node in graph.nodes:
            node.fill_colour = params.node_fill
    if every or change == StyleChange.NODE_OUTLINE:
        for node in graph.nodes:
            node.outline_colour = params.node_outline
    if every or change == StyleChange.NODE_THICKNESS:
        for node in graph.nodes:
            node.outline_thickness = params.node_thickness
    if every or change in _LABEL_CHANGES:
        apply_labels(graph, params)
    if every or change == StyleChange.NODE_LABEL_SIZE:
        for node in graph.nodes:
            node.label_size = max(1.0, params.node_label_size)

    if every or change == StyleChange.EDGE_SIZE:
        for edge in graph.edges:
            edge.pen_width = params.edge_width
    if every or change == StyleChange.EDGE_LABEL:
        for edge in graph.edges:
            edge.label = params.edge_label
    if every or change == StyleChange.EDGE_LABEL_SIZE:
        for edge in graph.edges:
            edge.label_size = max(1.0, params.edge_label_size)
    if every or change == StyleChange.EDGE_COLOUR:
        for edge in graph.edges:
            edge.colour = params.edge_colour

    if every or change == StyleChange.ROTATION:
        # Positive angles turn the drawing counter-clockwise on screen.
        graph.rotate(-params.rotation)

    logger.debug(f"Styled {graph!r} ({change.value})")
    return graph


def _place_nodes(graph: Graph, params: StyleParams, display: DisplayConfig) -> None:
    width = max(MIN_EXTENT, params.width - params.node_diameter)
    height = max(MIN_EXTENT, params.height - params.node_diameter)
    for node in graph.nodes:
        px, py = node.preview_pos
        node.pos = (px * width * display.x_dpi, py * height * display.y_dpi)
    for edge in graph.edges:
        edge.source_radius = graph.nodes[edge.source].radius_px(display.x_dpi)
        edge.dest_radius = graph.nodes[edge.dest].radius_px(display.x_dpi)
    graph.adjust_edges()


def apply_labels(graph: Graph, params: StyleParams) -> None:
    """Label nodes by number, by bipartite row prefix or by a single prefix.

    Prefix labels are written as TeX subscripts (``v_{3}``). Counters
    start at ``params.label_start``.
    """
    start = params.label_start
    if params.numbered_labels:
        for i, node in enumerate(graph.nodes):
            node.label = str(i + start)
        return

    top, bottom = params.top_label, params.bottom_label
    if graph.family == GraphFamily.BIPARTITE.value and top:
        roles = graph.roles
        for node in graph.nodes:
            node.label = ""
        for prefix, row in ((top, roles.bipartite_top), (bottom or top, roles.bipartite_bottom)):
            for j, index in enumerate(row):
                graph.nodes[index].label = _prefixed(prefix, j + start)
        return

    for i, node in enumerate(graph.nodes):
        node.label = _prefixed(top, i + start) if top else ""


def _prefixed(prefix: str, number: int) -> str:
    return f"{prefix}_{{{number}}}"
