"""Native ``.grphc`` text format: writer and reader.

Layout, one record per line::

    N
    x,y,diameter,rotation,fillR,fillG,fillB,outlineR,outlineG,outlineB[,label,labelSize]
    ...                                   (N node rows)
    u,v,destRadius,sourceRadius,rotation,penWidth,r,g,b[,label,labelSize]
    ...                                   (edge rows until end of file)

Colour channels are fractions in [0, 1]; ``u`` and ``v`` are 0-based node
rows. Blank lines and lines starting with ``#`` are ignored. Labels are
written unquoted, so a reader takes everything between the fixed leading
fields and the trailing size as the label.
"""

import logging
import math
from pathlib import Path

from ..errors import FormatError
from ..models import DEFAULT_LABEL_SIZE, Colour, Edge, Graph, Node
from .framework import GraphRenderer

logger = logging.getLogger(__name__)

NODE_FIELDS = 10
EDGE_FIELDS = 9


def format_number(value: float) -> str:
    """Shortest text for ``value`` with at most 10 significant digits."""
    text = f"{value:.10g}"
    return "0" if text == "-0" else text


def centred_positions(graph: Graph) -> list[tuple[float, float]]:
    """Scene positions shifted so their bounding box is centred on the origin."""
    positions = graph.scene_positions()
    if not positions:
        return []
    xs = [p[0] for p in positions]
    ys = [p[1] for p in positions]
    cx = (min(xs) + max(xs)) / 2
    cy = (min(ys) + max(ys)) / 2
    return [(x - cx, y - cy) for x, y in positions]


class GrphcRenderer(GraphRenderer):
    """Writer for the native .grphc format."""

    @property
    def format_name(self) -> str:
        return "grphc"

    def get_file_extension(self) -> str:
        return ".grphc"

    def render(self, graph: Graph) -> str:
        """Render graph as .grphc text."""
        graph.assign_ids()
        lines = [str(len(graph.nodes))]

        for node, (x, y) in zip(graph.nodes, centred_positions(graph)):
            fields = [x, y, node.diameter, node.rotation_degrees,
                      *node.fill_colour.fractions(), *node.outline_colour.fractions()]
            lines.append(self._join(fields, node.label, node.label_size))

        for low, high, edge in graph.undirected_edges():
            fields = [edge.dest_radius, edge.source_radius, edge.rotation_degrees,
                      edge.pen_width, *edge.colour.fractions()]
            lines.append(f"{low},{high}," + self._join(fields, edge.label, edge.label_size))

        return "\n".join(lines) + "\n"

    def _join(self, values: list[float], label: str, label_size: float) -> str:
        fields = [format_number(v) for v in values]
        if label:
            fields += [label, format_number(label_size)]
        return ",".join(fields)


def load_grphc(path: str | Path) -> Graph:
    """Read a .grphc file.

    Raises:
        OSError: If the file cannot be read
        FormatError: If a line does not follow the format or is not UTF-8
    """
    path = Path(path)
    data = path.read_bytes()
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        line_no = data.count(b"\n", 0, e.start) + 1
        raise FormatError(line_no, f"invalid UTF-8 byte at offset {e.start}", str(path))
    graph = parse_grphc(text, source=str(path))
    logger.info(f"Loaded {path}: {len(graph.nodes)} nodes, {len(graph.edges)} edges")
    return graph


def parse_grphc(text: str, source: str | None = None) -> Graph:
    """Parse .grphc text into a new graph.

    Nothing is built until every line has parsed, so a FormatError never
    leaves a partial graph behind. Node preview positions are derived from
    the stored positions so the graph can be restyled.
    """
    count = None
    count_line = 0
    nodes: list[Node] = []
    edge_rows: list[tuple[int, Edge]] = []

    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        if count is None:
            count = _parse_int(line, line_no, source, "node count")
            if count < 0:
                raise FormatError(line_no, f"node count must be >= 0, got {count}", source)
            count_line = line_no
        elif len(nodes) < count:
            nodes.append(_parse_node(line.split(","), line_no, source))
        else:
            edge = _parse_edge(line.split(","), line_no, source)
            for index in (edge.source, edge.dest):
                if not 0 <= index < count:
                    raise FormatError(line_no, f"node index {index} out of range 0..{count - 1}", source)
            edge_rows.append((line_no, edge))

    if count is None:
        raise FormatError(1, "missing node count", source)
    if len(nodes) < count:
        raise FormatError(count_line, f"expected {count} node rows, found {len(nodes)}", source)

    graph = Graph()
    for node in nodes:
        graph.add_node(node)
    for _, edge in edge_rows:
        graph.edges.append(edge)
    graph.rebuild_adjacency()
    graph.adjust_edges()
    graph.assign_ids()
    _normalise_preview(graph)
    return graph


def _parse_node(fields: list[str], line_no: int, source: str | None) -> Node:
    label, label_size = _split_label(fields, NODE_FIELDS, line_no, source, "node")
    values = [_parse_float(f, line_no, source) for f in fields[:NODE_FIELDS]]
    x, y, diameter, rotation = values[:4]
    if diameter <= 0:
        raise FormatError(line_no, f"node diameter must be > 0, got {format_number(diameter)}", source)
    return Node(
        pos=(x, y),
        diameter=diameter,
        rotation_degrees=rotation,
        fill_colour=Colour.from_fractions(*values[4:7]),
        outline_colour=Colour.from_fractions(*values[7:10]),
        label=label,
        label_size=label_size,
    )


def _parse_edge(fields: list[str], line_no: int, source: str | None) -> Edge:
    label, label_size = _split_label(fields, EDGE_FIELDS, line_no, source, "edge")
    u = _parse_int(fields[0], line_no, source, "node index")
    v = _parse_int(fields[1], line_no, source, "node index")
    if u == v:
        raise FormatError(line_no, f"edge joins node {u} to itself", source)
    values = [_parse_float(f, line_no, source) for f in fields[2:EDGE_FIELDS]]
    dest_radius, source_radius, rotation, pen_width = values[:4]
    return Edge(
        u, v,
        pen_width=pen_width,
        colour=Colour.from_fractions(*values[4:7]),
        label=label,
        label_size=label_size,
        source_radius=source_radius,
        dest_radius=dest_radius,
        rotation_degrees=rotation,
    )


def _split_label(fields: list[str], fixed: int, line_no: int, source: str | None,
                 kind: str) -> tuple[str, float]:
    if len(fields) == fixed:
        return "", DEFAULT_LABEL_SIZE
    if len(fields) < fixed + 2:
        raise FormatError(
            line_no,
            f"{kind} row has {len(fields)} fields, expected {fixed} or {fixed + 2}",
            source,
        )
    label = ",".join(fields[fixed:-1])
    return label, _parse_float(fields[-1], line_no, source)


def _parse_float(token: str, line_no: int, source: str | None) -> float:
    try:
        value = float(token)
    except ValueError:
        raise FormatError(line_no, f"bad number '{token.strip()}'", source)
    if not math.isfinite(value):
        raise FormatError(line_no, f"bad number '{token.strip()}'", source)
    return value


def _parse_int(token: str, line_no: int, source: str | None, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise FormatError(line_no, f"bad {what} '{token.strip()}'", source)


def _normalise_preview(graph: Graph) -> None:
    if not graph.nodes:
        return
    xs = [n.x for n in graph.nodes]
    ys = [n.y for n in graph.nodes]
    width = max(xs) - min(xs)
    height = max(ys) - min(ys)
    cx = (min(xs) + max(xs)) / 2
    cy = (min(ys) + max(ys)) / 2
    for node in graph.nodes:
        node.preview_pos = (
            (node.x - cx) / width if width else 0.0,
            (node.y - cy) / height if height else 0.0,
        )
