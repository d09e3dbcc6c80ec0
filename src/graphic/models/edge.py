"""Edge model and its cached drawing geometry."""

import math
from dataclasses import dataclass, field

from graphic.models.colour import BLACK, Colour
from graphic.models.node import DEFAULT_LABEL_SIZE

Point = tuple[float, float]

# Half-width, in pixels, of the picking rectangle around an edge.
SELECTION_OFFSET = 5.0


@dataclass
class Edge:
    """An undirected edge between two nodes of the same graph.

    ``source`` and ``dest`` are node indices in the owning graph's arena.
    Radii and ``pen_width`` are in drawing pixels.
    """
    source: int
    dest: int
    pen_width: float = 1.0
    colour: Colour = BLACK
    label: str = ""
    label_size: float = DEFAULT_LABEL_SIZE
    source_radius: float = 1.0
    dest_radius: float = 1.0
    rotation_degrees: float = 0.0
    source_point: Point = (0.0, 0.0)
    dest_point: Point = (0.0, 0.0)
    selection_polygon: list[Point] = field(default_factory=list)

    def __post_init__(self):
        if self.source == self.dest:
            raise ValueError(f"edge endpoints must differ (both are {self.source})")
        self.label_size = max(1.0, self.label_size)

    def other(self, node_index: int) -> int:
        """Return the endpoint opposite ``node_index``."""
        return self.dest if node_index == self.source else self.source

    def adjust(self, source_centre: Point, dest_centre: Point) -> None:
        """Recompute the visible segment and picking polygon.

        The segment runs from the rim of the source disc to the rim of the
        destination disc; when the discs are too close it collapses onto the
        source centre.
        """
        x1, y1 = source_centre
        x2, y2 = dest_centre
        dx = x2 - x1
        dy = y2 - y1
        length = math.hypot(dx, dy)

        if length > self.dest_radius * 2:
            self.source_point = (x1 + dx * self.source_radius / length,
                                 y1 + dy * self.source_radius / length)
            self.dest_point = (x2 - dx * self.dest_radius / length,
                               y2 - dy * self.dest_radius / length)
        else:
            self.source_point = self.dest_point = (x1, y1)

        self.selection_polygon = _selection_polygon(source_centre, dest_centre)


def _selection_polygon(p1: Point, p2: Point) -> list[Point]:
    # Angle measured counter-clockwise on screen, i.e. with y flipped.
    angle = math.atan2(-(p2[1] - p1[1]), p2[0] - p1[0])
    ox = SELECTION_OFFSET * math.sin(angle)
    oy = SELECTION_OFFSET * math.cos(angle)
    return [
        (p1[0] + ox, p1[1] + oy),
        (p1[0] - ox, p1[1] - oy),
        (p2[0] - ox, p2[1] - oy),
        (p2[0] + ox, p2[1] + oy),
    ]
