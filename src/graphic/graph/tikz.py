"""TikZ picture renderer."""

import logging

from ..config import DisplayConfig
from ..models import Colour, Graph
from .colour_names import colour_name
from .framework import GraphRenderer
from .grphc import centred_positions, format_number

logger = logging.getLogger(__name__)


class TikzRenderer(GraphRenderer):
    """Renders a styled graph as a ``tikzpicture`` scaled in inches.

    Colours TikZ knows by name are referenced directly; any other colour is
    declared with ``\\definecolor`` just before the first line that uses it.
    """

    def __init__(self, display: DisplayConfig | None = None):
        self.display = display or DisplayConfig()

    @property
    def format_name(self) -> str:
        return "tikz"

    def get_file_extension(self) -> str:
        return ".tikz"

    def render(self, graph: Graph) -> str:
        """Render graph as a TikZ picture."""
        x_dpi, y_dpi = self.display.x_dpi, self.display.y_dpi
        lines = [r"\begin{tikzpicture}[x=1in, y=1in]"]

        graph.assign_ids()
        for i, (node, (x, y)) in enumerate(zip(graph.nodes, centred_positions(graph))):
            fill = self._colour(lines, f"v{i}fill", node.fill_colour)
            draw = self._colour(lines, f"v{i}draw", node.outline_colour)
            script = "" if "^" in node.label else "^{}"
            lines.append(
                f"\\node (v{i}) at ({format_number(x / x_dpi)}, {format_number(-y / y_dpi)}) "
                f"[inner sep=0, shape=circle, minimum size={format_number(node.diameter)}in, "
                f"fill={fill}, draw={draw}, {_font(node.label_size)}] "
                f"{{${node.label}{script}$}};"
            )

        for k, (low, high, edge) in enumerate(graph.undirected_edges()):
            draw = self._colour(lines, f"e{k}draw", edge.colour)
            label = ""
            if edge.label:
                label = f" node[{_font(edge.label_size)}] {{${edge.label}$}}"
            lines.append(
                f"\\path (v{low}) edge[draw={draw}, "
                f"line width={format_number(edge.pen_width / x_dpi)}in]{label} (v{high});"
            )

        lines.append(r"\end{tikzpicture}")
        logger.debug(f"TikZ picture: {len(graph.nodes)} nodes, {len(graph.edges)} edges")
        return "\n".join(lines) + "\n"

    def _colour(self, lines: list[str], local_name: str, colour: Colour) -> str:
        name = colour_name(colour)
        if name is not None:
            return name
        lines.append(f"\\definecolor{{{local_name}}}{{RGB}}{{{colour.r},{colour.g},{colour.b}}}")
        return local_name


def _font(size: float) -> str:
    return f"font=\\fontsize{{{format_number(size)}}}{{1}}\\selectfont"
