"""Graph generation and rendering framework."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from ..config import GraphicConfig, StyleParams
from ..errors import UnknownFormatError
from ..models import Graph
from .basic_graphs import generate
from .families import GraphFamily
from .styler import StyleChange, style

logger = logging.getLogger(__name__)


class GraphRenderer(ABC):
    """Abstract base class for graph renderers."""

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Name of the output format."""
        pass

    @abstractmethod
    def render(self, graph: Graph) -> str:
        """Render a styled graph to string format."""
        pass

    @abstractmethod
    def get_file_extension(self) -> str:
        """Get file extension for this format."""
        pass


class GraphGenerator:
    """Generates, styles and renders family graphs for one configuration."""

    def __init__(self, config: GraphicConfig):
        self.config = config
        self.renderers: dict[str, GraphRenderer] = {}

    def add_renderer(self, renderer: GraphRenderer) -> None:
        """Add a graph renderer."""
        self.renderers[renderer.format_name] = renderer

    def generate(self, family: GraphFamily | str, count: int, second: int | None = None,
                 draw_edges: bool = True, params: StyleParams | None = None) -> Graph:
        """Generate a family graph and style it.

        Args:
            family: Graph family to build
            count: First family parameter
            second: Second family parameter, if the family takes one
            draw_edges: Emit edges as well as nodes
            params: Style to apply (default: the configured style)

        Returns:
            Styled graph
        """
        graph = generate(family, count, second, draw_edges=draw_edges)
        return self.style(graph, params)

    def style(self, graph: Graph, params: StyleParams | None = None) -> Graph:
        """Apply every style attribute to ``graph``."""
        if params is None:
            params = self.config.style
        return style(graph, StyleChange.ALL, params, self.config.display)

    def render_graph(self, graph: Graph, format_name: str = "tikz") -> str:
        """Render graph to string.

        Args:
            graph: Styled graph to render
            format_name: Output format ('tikz', 'grphc', 'edges')

        Returns:
            Rendered graph as string
        """
        if format_name not in self.renderers:
            available = list(self.renderers.keys())
            raise UnknownFormatError(format_name, available)

        renderer = self.renderers[format_name]
        logger.info(f"Rendering graph with {renderer.format_name} renderer")
        return renderer.render(graph)

    def write_graph(self, graph: Graph, output: Path, format_name: str = "tikz") -> Path:
        """Render graph and write it to ``output``.

        A directory (or a path without suffix) gets ``graph`` plus the
        renderer's file extension.
        """
        content = self.render_graph(graph, format_name)
        output = Path(output)
        if output.is_dir() or not output.suffix:
            output = output / f"graph{self.renderers[format_name].get_file_extension()}"
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(content, encoding="utf-8")
        logger.info(f"Wrote {format_name} output to {output}")
        return output
