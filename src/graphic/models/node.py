"""Node model for graphic graphs."""

from dataclasses import dataclass, field

from graphic.models.colour import BLACK, WHITE, Colour

DEFAULT_LABEL_SIZE = 12.0


@dataclass
class Node:
    """A vertex drawn as a disc.

    ``pos`` is in drawing pixels in the owning graph's local frame (y grows
    downwards); ``preview_pos`` is the size-independent position emitted by a
    generator in the unit region centred on the origin.
    """
    pos: tuple[float, float] = (0.0, 0.0)
    preview_pos: tuple[float, float] = (0.0, 0.0)
    diameter: float = 0.2  # inches
    outline_thickness: float = 1.0  # pixels
    fill_colour: Colour = WHITE
    outline_colour: Colour = BLACK
    label: str = ""
    label_size: float = DEFAULT_LABEL_SIZE
    rotation_degrees: float = 0.0
    id: int = -1
    edge_ids: list[int] = field(default_factory=list)

    def __post_init__(self):
        if self.diameter <= 0:
            raise ValueError("node diameter must be > 0")
        self.label_size = max(1.0, self.label_size)

    def add_edge(self, edge_id: int) -> None:
        """Record an incident edge."""
        self.edge_ids.append(edge_id)

    def remove_edge(self, edge_id: int) -> bool:
        """Forget an incident edge; returns False if it was not recorded."""
        try:
            self.edge_ids.remove(edge_id)
        except ValueError:
            return False
        return True

    @property
    def x(self) -> float:
        return self.pos[0]

    @property
    def y(self) -> float:
        return self.pos[1]

    def radius_px(self, x_dpi: float) -> float:
        """Disc radius in drawing pixels."""
        return self.diameter * x_dpi / 2.0
