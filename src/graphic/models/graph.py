"""Arena-backed graph container.

A Graph owns one list of nodes and one list of edges. Edges and role
buckets refer to nodes by index, and each node keeps the indices of its
incident edges so geometry can be refreshed when the node moves.
"""

import copy
import logging
import math
import weakref
from dataclasses import dataclass, field

from graphic.models.edge import Edge
from graphic.models.node import Node

logger = logging.getLogger(__name__)


@dataclass
class RoleBuckets:
    """Structural roles that generated nodes play, as node indices."""
    cycle: list[int] = field(default_factory=list)
    double_cycle: list[list[int]] = field(default_factory=list)
    list_of_cycles: list[list[int]] = field(default_factory=list)
    bipartite_top: list[int] = field(default_factory=list)
    bipartite_bottom: list[int] = field(default_factory=list)
    grid: list[int] = field(default_factory=list)
    path: list[int] = field(default_factory=list)
    binary_heap: list[int] = field(default_factory=list)
    center: int | None = None

    def all_indices(self) -> set[int]:
        indices = set(self.cycle) | set(self.bipartite_top) | set(self.bipartite_bottom)
        indices |= set(self.grid) | set(self.path) | set(self.binary_heap)
        for ring in self.double_cycle + self.list_of_cycles:
            indices |= set(ring)
        if self.center is not None:
            indices.add(self.center)
        return indices

    def remap(self, mapping: dict[int, int]) -> "RoleBuckets":
        """Return buckets with indices translated; unmapped indices are dropped."""
        def _list(values):
            return [mapping[v] for v in values if v in mapping]

        return RoleBuckets(
            cycle=_list(self.cycle),
            double_cycle=[_list(ring) for ring in self.double_cycle],
            list_of_cycles=[_list(ring) for ring in self.list_of_cycles],
            bipartite_top=_list(self.bipartite_top),
            bipartite_bottom=_list(self.bipartite_bottom),
            grid=_list(self.grid),
            path=_list(self.path),
            binary_heap=_list(self.binary_heap),
            center=mapping.get(self.center) if self.center is not None else None,
        )


class Graph:
    """A drawable graph: nodes, edges, role buckets and a rotation."""

    def __init__(self, family: str | None = None):
        self.family = family
        self.nodes: list[Node] = []
        self.edges: list[Edge] = []
        self.roles = RoleBuckets()
        self.rotation_radians = 0.0
        self.moved = False
        self._parent: weakref.ref | None = None

    def __repr__(self) -> str:
        return (f"Graph(family={self.family!r}, nodes={len(self.nodes)}, "
                f"edges={len(self.edges)})")

    # -- arena ---------------------------------------------------------

    def add_node(self, node: Node | None = None) -> int:
        """Append a node and return its index."""
        if node is None:
            node = Node()
        self.nodes.append(node)
        return len(self.nodes) - 1

    def add_edge(self, source: int, dest: int, **attrs) -> int | None:
        """Join two nodes; returns the new edge index, or None for a self-loop."""
        if source == dest:
            logger.debug(f"Ignoring self-loop on node {source}")
            return None
        for index in (source, dest):
            if not 0 <= index < len(self.nodes):
                raise IndexError(f"node index {index} out of range")

        edge = Edge(source, dest, **attrs)
        self.edges.append(edge)
        edge_id = len(self.edges) - 1
        self.nodes[source].add_edge(edge_id)
        self.nodes[dest].add_edge(edge_id)
        self.adjust_edge(edge_id)
        return edge_id

    def remove_edge(self, edge_id: int) -> None:
        """Delete an edge and renumber the ones after it."""
        edge = self.edges[edge_id]
        self.nodes[edge.source].remove_edge(edge_id)
        self.nodes[edge.dest].remove_edge(edge_id)
        del self.edges[edge_id]
        for node in self.nodes:
            node.edge_ids = [e - 1 if e > edge_id else e for e in node.edge_ids]

    def remove_node(self, index: int) -> None:
        """Delete a node after severing every incident edge."""
        for edge_id in sorted(self.nodes[index].edge_ids, reverse=True):
            self.remove_edge(edge_id)
        del self.nodes[index]

        mapping = {old: (old if old < index else old - 1)
                   for old in range(len(self.nodes) + 1) if old != index}
        for edge in self.edges:
            edge.source = mapping[edge.source]
            edge.dest = mapping[edge.dest]
        self.roles = self.roles.remap(mapping)

    def rebuild_adjacency(self) -> None:
        """Recompute every node's incident-edge list from the edge arena."""
        for node in self.nodes:
            node.edge_ids = []
        for edge_id, edge in enumerate(self.edges):
            self.nodes[edge.source].add_edge(edge_id)
            self.nodes[edge.dest].add_edge(edge_id)

    def incident_edges(self, index: int) -> list[Edge]:
        return [self.edges[e] for e in self.nodes[index].edge_ids]

    def node_of(self, node: Node) -> int:
        """Index of a node object in this graph (by identity)."""
        for index, candidate in enumerate(self.nodes):
            if candidate is node:
                return index
        raise ValueError("node does not belong to this graph")

    # -- geometry ------------------------------------------------------

    def adjust_edge(self, edge_id: int) -> None:
        edge = self.edges[edge_id]
        edge.adjust(self.nodes[edge.source].pos, self.nodes[edge.dest].pos)

    def adjust_edges(self) -> None:
        for edge_id in range(len(self.edges)):
            self.adjust_edge(edge_id)

    def move_node(self, index: int, pos: tuple[float, float]) -> None:
        """Place a node and refresh its incident edges."""
        self.nodes[index].pos = pos
        for edge_id in self.nodes[index].edge_ids:
            self.adjust_edge(edge_id)

    @property
    def rotation_degrees(self) -> float:
        return math.degrees(self.rotation_radians)

    def rotate(self, degrees: float, keep_rotation: bool = False) -> None:
        """Rotate the graph, keeping node and edge text upright.

        With ``keep_rotation`` the angle is added to the current rotation,
        otherwise it replaces it.
        """
        total = self.rotation_degrees + degrees if keep_rotation else degrees
        for node in self.nodes:
            node.rotation_degrees = -total
        for edge in self.edges:
            edge.rotation_degrees = -total
        self.rotation_radians = math.radians(total)

    def scene_positions(self) -> list[tuple[float, float]]:
        """Node positions with the graph rotation applied (clockwise on screen)."""
        cos_t = math.cos(self.rotation_radians)
        sin_t = math.sin(self.rotation_radians)
        return [(x * cos_t - y * sin_t, x * sin_t + y * cos_t)
                for x, y in (node.pos for node in self.nodes)]

    def bounding_rect(self, x_dpi: float = 96.0, y_dpi: float = 96.0) -> tuple[float, float, float, float]:
        """Axis-aligned hull of the node discs as (left, top, width, height)."""
        if not self.nodes:
            return (0.0, 0.0, 0.0, 0.0)
        left = min(n.x - n.diameter * x_dpi / 2 for n in self.nodes)
        right = max(n.x + n.diameter * x_dpi / 2 for n in self.nodes)
        top = min(n.y - n.diameter * y_dpi / 2 for n in self.nodes)
        bottom = max(n.y + n.diameter * y_dpi / 2 for n in self.nodes)
        return (left, top, right - left, bottom - top)

    # -- export helpers ------------------------------------------------

    def assign_ids(self) -> None:
        """Number nodes 0..n-1 in insertion order."""
        for index, node in enumerate(self.nodes):
            node.id = index

    def undirected_edges(self) -> list[tuple[int, int, Edge]]:
        """Each edge once as (low, high, edge), in node then incidence order."""
        result = []
        for index, node in enumerate(self.nodes):
            for edge_id in node.edge_ids:
                edge = self.edges[edge_id]
                other = edge.other(index)
                if other > index:
                    result.append((index, other, edge))
        return result

    # -- composition ---------------------------------------------------

    def mark_moved(self) -> None:
        """Flag the graph as placed on a canvas."""
        self.moved = True

    @property
    def parent(self) -> "Graph | None":
        return self._parent() if self._parent is not None else None

    @classmethod
    def join(cls, *graphs: "Graph") -> "Graph":
        """Concatenate graphs into a new parent graph.

        Node positions are taken in each input's rotated frame; edges and role
        buckets are remapped to the combined arena.
        """
        joined = cls()
        for graph in graphs:
            offset = len(joined.nodes)
            for node, pos in zip(graph.nodes, graph.scene_positions()):
                clone = copy.deepcopy(node)
                clone.pos = pos
                clone.edge_ids = []
                joined.add_node(clone)
            for edge in graph.edges:
                clone = copy.deepcopy(edge)
                clone.source += offset
                clone.dest += offset
                joined.edges.append(clone)

            mapping = {i: i + offset for i in range(len(graph.nodes))}
            shifted = graph.roles.remap(mapping)
            roles = joined.roles
            roles.cycle += shifted.cycle
            roles.double_cycle += shifted.double_cycle
            roles.list_of_cycles += shifted.list_of_cycles
            roles.bipartite_top += shifted.bipartite_top
            roles.bipartite_bottom += shifted.bipartite_bottom
            roles.grid += shifted.grid
            roles.path += shifted.path
            roles.binary_heap += shifted.binary_heap
            if roles.center is None:
                roles.center = shifted.center

            graph._parent = weakref.ref(joined)

        joined.rebuild_adjacency()
        joined.adjust_edges()
        logger.debug(f"Joined {len(graphs)} graphs into {joined!r}")
        return joined


def root_parent(graph: Graph) -> Graph:
    """Walk parent links up to the topmost graph."""
    current = graph
    while current.parent is not None:
        current = current.parent
    return current
