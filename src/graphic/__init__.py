"""graphic - parametric graph layout core.

graphic generates drawings of the standard graph families (cycles, wheels,
Petersen graphs, grids, trees and more), styles them to a requested size and
exports them as TikZ pictures, .grphc files or edge lists.
"""

__version__ = "0.1.0"
__author__ = "graphic developers"
__description__ = "Parametric graph layout and TikZ export"

from graphic.config import GraphicConfig

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "GraphicConfig",
]
