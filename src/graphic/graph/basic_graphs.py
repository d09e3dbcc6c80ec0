"""Parametric generators for the named graph families.

Every generator lays its nodes out in preview coordinates: the square
``[-0.5, 0.5]²`` centred on the origin with y growing downwards. The
styler later maps these onto the requested drawing size. Ring radii are
given relative to the outer ring, whose preview radius is 0.5.
"""

import logging
import math

from ..models import Graph, Node
from .families import GraphFamily, coerce_parameters

logger = logging.getLogger(__name__)

OUTER_RADIUS = 0.5
HELM_INNER_RATIO = 0.65
ANTIPRISM_INNER_RATIO = 0.25
WINDMILL_BLADE_HEIGHT = 0.25

Point = tuple[float, float]


def cycle_points(n: int, h_radius: float, v_radius: float, start_angle: float = 0.0) -> list[Point]:
    """Points on an ellipse, clockwise from the top (for ``start_angle`` 0)."""
    points = []
    for i in range(n):
        theta = start_angle + i * 2 * math.pi / n
        points.append((h_radius * math.sin(theta), -v_radius * math.cos(theta)))
    return points


def make_cycle(graph: Graph, n: int, h_radius: float = OUTER_RADIUS,
               v_radius: float | None = None, start_angle: float = 0.0) -> list[int]:
    """Add ``n`` nodes on an ellipse to ``graph`` and return their indices."""
    if v_radius is None:
        v_radius = h_radius
    return [_add_point(graph, p) for p in cycle_points(n, h_radius, v_radius, start_angle)]


def _add_point(graph: Graph, point: Point) -> int:
    return graph.add_node(Node(pos=point, preview_pos=point))


def _set_point(graph: Graph, index: int, point: Point) -> None:
    node = graph.nodes[index]
    node.preview_pos = point
    node.pos = point


def _ring_pairs(ring: list[int]) -> list[tuple[int, int]]:
    """Consecutive pairs closing a ring, without loops or doubled edges."""
    if len(ring) < 2:
        return []
    if len(ring) == 2:
        return [(ring[0], ring[1])]
    return [(ring[i], ring[(i + 1) % len(ring)]) for i in range(len(ring))]


def _connect(graph: Graph, pairs) -> None:
    for source, dest in pairs:
        graph.add_edge(source, dest)


def _linear(k: int, count: int) -> float:
    """Evenly spaced coordinate in [-0.5, 0.5]; 0 for a single item."""
    if count == 1:
        return 0.0
    return k / (count - 1) - 0.5


# -- ring families -------------------------------------------------------

def cycle(n: int, draw_edges: bool = True) -> Graph:
    graph = Graph(GraphFamily.CYCLE.value)
    ring = make_cycle(graph, n)
    graph.roles.cycle = ring
    if draw_edges:
        _connect(graph, _ring_pairs(ring))
    return graph


def complete(n: int, draw_edges: bool = True) -> Graph:
    graph = Graph(GraphFamily.COMPLETE.value)
    ring = make_cycle(graph, n)
    graph.roles.cycle = ring
    if draw_edges:
        _connect(graph, [(ring[i], ring[j]) for i in range(n) for j in range(i + 1, n)])
    return graph


def _hub_and_ring(graph: Graph, n: int) -> tuple[list[int], int]:
    ring = make_cycle(graph, n - 1)
    centre = _add_point(graph, (0.0, 0.0))
    graph.roles.cycle = ring
    graph.roles.center = centre
    return ring, centre


def star(n: int, draw_edges: bool = True) -> Graph:
    """A centre joined to ``n - 1`` nodes on a ring."""
    graph = Graph(GraphFamily.STAR.value)
    ring, centre = _hub_and_ring(graph, n)
    if draw_edges:
        _connect(graph, [(centre, i) for i in ring])
    return graph


def wheel(n: int, draw_edges: bool = True) -> Graph:
    """A star whose peripheral nodes also form a cycle."""
    graph = Graph(GraphFamily.WHEEL.value)
    ring, centre = _hub_and_ring(graph, n)
    if draw_edges:
        _connect(graph, [(centre, i) for i in ring])
        _connect(graph, _ring_pairs(ring))
    return graph


def gear(n: int, draw_edges: bool = True) -> Graph:
    """A cycle with every odd node pulled onto the chord of its neighbours.

    An odd ``n`` puts the last node at the centre, joined to the even
    ring nodes.
    """
    graph = Graph(GraphFamily.GEAR.value)
    has_centre = n % 2 == 1
    count = n - 1 if has_centre else n
    ring = make_cycle(graph, count)
    for i in range(1, count, 2):
        before = graph.nodes[ring[i - 1]].preview_pos
        after = graph.nodes[ring[(i + 1) % count]].preview_pos
        _set_point(graph, ring[i], ((before[0] + after[0]) / 2, (before[1] + after[1]) / 2))
    graph.roles.cycle = ring

    centre = None
    if has_centre:
        centre = _add_point(graph, (0.0, 0.0))
        graph.roles.center = centre

    if draw_edges:
        if centre is not None:
            _connect(graph, [(centre, ring[i]) for i in range(0, count, 2)])
        _connect(graph, _ring_pairs(ring))
    return graph


def _double_ring(graph: Graph, n: int, inner_ratio: float) -> tuple[list[int], list[int]]:
    outer = make_cycle(graph, n)
    inner = make_cycle(graph, n, OUTER_RADIUS * inner_ratio)
    graph.roles.double_cycle = [outer, inner]
    return outer, inner


def helm(n: int, draw_edges: bool = True) -> Graph:
    """A wheel on the inner ring with a pendant node outside each spoke."""
    graph = Graph(GraphFamily.HELM.value)
    outer, inner = _double_ring(graph, n, HELM_INNER_RATIO)
    centre = _add_point(graph, (0.0, 0.0))
    graph.roles.center = centre
    if draw_edges:
        for i in range(n):
            graph.add_edge(inner[i], centre)
            graph.add_edge(inner[i], outer[i])
        _connect(graph, _ring_pairs(inner))
    return graph


def crown(n: int, draw_edges: bool = True) -> Graph:
    graph = Graph(GraphFamily.CROWN.value)
    outer, inner = _double_ring(graph, n, HELM_INNER_RATIO)
    if draw_edges:
        _connect(graph, zip(outer, inner))
        _connect(graph, _ring_pairs(inner))
    return graph


def prism(n: int, draw_edges: bool = True) -> Graph:
    graph = Graph(GraphFamily.PRISM.value)
    outer, inner = _double_ring(graph, n, 0.5)
    if draw_edges:
        _connect(graph, _ring_pairs(outer))
        _connect(graph, zip(outer, inner))
        _connect(graph, _ring_pairs(inner))
    return graph


def antiprism(n: int, draw_edges: bool = True) -> Graph:
    """Two interleaved rings; expects an even ``n`` of at least 6."""
    graph = Graph(GraphFamily.ANTIPRISM.value)
    ring = make_cycle(graph, n)
    radius = OUTER_RADIUS * ANTIPRISM_INNER_RATIO
    for i in range(1, n, 2):
        theta = i * 2 * math.pi / n
        _set_point(graph, ring[i], (radius * math.sin(theta), -radius * math.cos(theta)))
    graph.roles.cycle = ring
    if draw_edges:
        for i in range(n):
            graph.add_edge(ring[i], ring[(i + 1) % n])
            graph.add_edge(ring[i], ring[(i + 2) % n])
    return graph


def petersen(n: int, k: int, draw_edges: bool = True) -> Graph:
    """Generalized Petersen graph GP(n, k)."""
    graph = Graph(GraphFamily.PETERSEN.value)
    outer, inner = _double_ring(graph, n, 0.5)
    if draw_edges:
        for i in range(n):
            graph.add_edge(outer[i], outer[(i + 1) % n])
            if k % n != 0:
                graph.add_edge(inner[i], inner[(i + k) % n])
            graph.add_edge(outer[i], inner[i])
    return graph


# -- row and lattice families --------------------------------------------

def bipartite(top: int, bottom: int, draw_edges: bool = True) -> Graph:
    """Complete bipartite graph drawn as two rows.

    The longer row spans the full width; the shorter one is spread so its
    nodes sit centred between those of the longer row.
    """
    graph = Graph(GraphFamily.BIPARTITE.value)
    longest = max(top, bottom)

    def row_xs(count: int) -> list[float]:
        if count == longest:
            return [_linear(k, count) for k in range(count)]
        spacing = 1.0 / count
        return [-0.5 + spacing / 2 + k * spacing for k in range(count)]

    graph.roles.bipartite_top = [_add_point(graph, (x, -0.5)) for x in row_xs(top)]
    graph.roles.bipartite_bottom = [_add_point(graph, (x, 0.5)) for x in row_xs(bottom)]
    if draw_edges:
        _connect(graph, [(u, v) for u in graph.roles.bipartite_top
                         for v in graph.roles.bipartite_bottom])
    return graph


def grid(rows: int, columns: int, draw_edges: bool = True) -> Graph:
    """A ``rows`` x ``columns`` lattice, numbered row by row."""
    graph = Graph(GraphFamily.GRID.value)
    for r in range(rows):
        for c in range(columns):
            graph.roles.grid.append(_add_point(graph, (_linear(c, columns), _linear(r, rows))))
    if draw_edges:
        total = rows * columns
        for i in range(total):
            if (i + 1) % columns != 0:
                graph.add_edge(i, i + 1)
            if i + columns < total:
                graph.add_edge(i, i + columns)
    return graph


def path(n: int, draw_edges: bool = True) -> Graph:
    graph = Graph(GraphFamily.PATH.value)
    graph.roles.path = [_add_point(graph, (_linear(k, n), 0.0)) for k in range(n)]
    if draw_edges:
        _connect(graph, zip(graph.roles.path, graph.roles.path[1:]))
    return graph


def balanced_binary_tree(n: int, draw_edges: bool = True) -> Graph:
    """Binary heap layout: node ``i`` has children ``2i+1`` and ``2i+2``.

    Levels are spread evenly from top to bottom and the leaves of a full
    tree evenly across the row; a partial last level leaves gaps where its
    missing leaves would be.
    """
    graph = Graph(GraphFamily.BALANCED_BINARY_TREE.value)
    depth = n.bit_length() - 1
    for i in range(n):
        level = (i + 1).bit_length() - 1
        y = level / depth if depth else 0.5
        if level == 0:
            x = 0.5
        else:
            x = (((i - (2 ** level - 1)) * 2 ** (depth - level + 1) + (2 ** (depth - level) - 1))
                 / (2 * (2 ** depth - 1)))
        graph.roles.binary_heap.append(_add_point(graph, (x - 0.5, y - 0.5)))
    if draw_edges:
        for i in range(n):
            for child in (2 * i + 1, 2 * i + 2):
                if child < n:
                    graph.add_edge(i, child)
    return graph


def dutch_windmill(blades: int, blade_size: int, draw_edges: bool = True) -> Graph:
    """``blades`` cycles of ``blade_size`` nodes sharing one centre node."""
    graph = Graph(GraphFamily.DUTCH_WINDMILL.value)
    centre = _add_point(graph, (0.0, 0.0))
    graph.roles.center = centre

    blade_width = (2 * math.pi / blades) * (0.9 - 0.786 * math.exp(-0.135 * blades))
    v_radius = WINDMILL_BLADE_HEIGHT
    h_radius = v_radius * blade_width * blade_size / ((blade_size - 2) * math.pi)

    for b in range(blades):
        angle = b * 2 * math.pi / blades
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        # Start at the bottom so the dropped first point is the shared centre.
        points = cycle_points(blade_size, h_radius, v_radius, math.pi)[1:]
        blade = []
        for x, y in points:
            y -= v_radius
            blade.append(_add_point(graph, (x * cos_a - y * sin_a, x * sin_a + y * cos_a)))
        graph.roles.list_of_cycles.append(blade)

        if draw_edges:
            _connect(graph, zip(blade, blade[1:]))
            graph.add_edge(blade[0], centre)
            graph.add_edge(blade[-1], centre)
    return graph


_ONE_PARAMETER = {
    GraphFamily.ANTIPRISM: antiprism,
    GraphFamily.BALANCED_BINARY_TREE: balanced_binary_tree,
    GraphFamily.CROWN: crown,
    GraphFamily.CYCLE: cycle,
    GraphFamily.GEAR: gear,
    GraphFamily.HELM: helm,
    GraphFamily.PATH: path,
    GraphFamily.PRISM: prism,
    GraphFamily.COMPLETE: complete,
    GraphFamily.STAR: star,
    GraphFamily.WHEEL: wheel,
}

_TWO_PARAMETER = {
    GraphFamily.BIPARTITE: bipartite,
    GraphFamily.DUTCH_WINDMILL: dutch_windmill,
    GraphFamily.GRID: grid,
    GraphFamily.PETERSEN: petersen,
}


def generate(family: GraphFamily | str, count: int, second: int | None = None,
             draw_edges: bool = True) -> Graph:
    """Build a graph of ``family``, coercing parameters to legal values.

    Args:
        family: A GraphFamily or its value (e.g. ``"petersen"``).
        count: First parameter (nodes, rows, top nodes or blades).
        second: Second parameter for two-parameter families; ignored otherwise.
        draw_edges: When False only the nodes are emitted.

    Returns:
        Graph in preview coordinates, not yet styled.
    """
    family = GraphFamily(family)
    count, second = coerce_parameters(family, count, second)
    if family in _TWO_PARAMETER:
        graph = _TWO_PARAMETER[family](count, second, draw_edges=draw_edges)
    else:
        graph = _ONE_PARAMETER[family](count, draw_edges=draw_edges)
    logger.info(f"Generated {family.value} graph: {len(graph.nodes)} nodes, {len(graph.edges)} edges")
    return graph
