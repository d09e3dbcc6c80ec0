"""Graph data model: colours, nodes, edges and the arena graph."""

from graphic.models.colour import BLACK, WHITE, Colour
from graphic.models.edge import Edge
from graphic.models.graph import Graph, RoleBuckets, root_parent
from graphic.models.node import DEFAULT_LABEL_SIZE, Node

__all__ = [
    "Colour",
    "BLACK",
    "WHITE",
    "Node",
    "DEFAULT_LABEL_SIZE",
    "Edge",
    "Graph",
    "RoleBuckets",
    "root_parent",
]
