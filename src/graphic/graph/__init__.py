"""Graph generation, styling and rendering for graphic.

Builds the named graph families in preview coordinates, styles them to a
drawing size and writes them as .grphc, TikZ or a plain edge list.
"""

from ..config import GraphicConfig
from .basic_graphs import generate, make_cycle
from .colour_names import colour_from_name, lookup_colour
from .edgelist import EdgeListRenderer
from .families import FAMILY_INFO, GraphFamily, coerce_parameters, family_from_name
from .framework import GraphGenerator, GraphRenderer
from .grphc import GrphcRenderer, load_grphc, parse_grphc
from .styler import StyleChange, StyleParams, style
from .tikz import TikzRenderer


def create_generator(config: GraphicConfig) -> GraphGenerator:
    """GraphGenerator with every built-in renderer registered."""
    generator = GraphGenerator(config)
    generator.add_renderer(TikzRenderer(config.display))
    generator.add_renderer(GrphcRenderer())
    generator.add_renderer(EdgeListRenderer())
    return generator


__all__ = [
    "GraphFamily",
    "FAMILY_INFO",
    "family_from_name",
    "coerce_parameters",
    "generate",
    "make_cycle",
    "StyleChange",
    "StyleParams",
    "style",
    "lookup_colour",
    "colour_from_name",
    "GraphGenerator",
    "GraphRenderer",
    "GrphcRenderer",
    "TikzRenderer",
    "EdgeListRenderer",
    "load_grphc",
    "parse_grphc",
    "create_generator",
]
