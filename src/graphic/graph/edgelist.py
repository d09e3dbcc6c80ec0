"""Plain edge-list renderer."""

from ..models import Graph
from .framework import GraphRenderer


class EdgeListRenderer(GraphRenderer):
    """Node count on the first line, then one ``u,v`` pair per edge."""

    @property
    def format_name(self) -> str:
        return "edges"

    def get_file_extension(self) -> str:
        return ".edges"

    def render(self, graph: Graph) -> str:
        lines = [str(len(graph.nodes))]
        lines.extend(f"{low},{high}" for low, high, _ in graph.undirected_edges())
        return "\n".join(lines) + "\n"
