"""Colour names TikZ knows without a ``\\definecolor``."""

from ..models import Colour

# (name, (r, g, b), channels allowed to be off by one). LaTeX converts these
# through cmyk, so some channels come back one step away from the nominal.
_NAMED_COLOURS: list[tuple[str, tuple[int, int, int], tuple[bool, bool, bool]]] = [
    ("black", (0, 0, 0), (False, False, False)),
    ("white", (255, 255, 255), (False, False, False)),
    ("red", (255, 0, 0), (False, False, False)),
    ("green", (0, 255, 0), (False, False, False)),
    ("blue", (0, 0, 255), (False, False, False)),
    ("cyan", (0, 255, 255), (False, False, False)),
    ("magenta", (255, 0, 255), (False, False, False)),
    ("yellow", (255, 255, 0), (False, False, False)),
    ("gray", (127, 127, 127), (True, True, True)),
    ("darkgray", (63, 63, 63), (True, True, True)),
    ("lightgray", (191, 191, 191), (True, True, True)),
    ("brown", (191, 128, 63), (False, False, True)),
    ("purple", (191, 0, 63), (False, False, True)),
    ("orange", (255, 127, 0), (False, True, False)),
    ("violet", (127, 0, 127), (True, False, True)),
]


def lookup_colour(r: int, g: int, b: int) -> str | None:
    """Return the TikZ name for an RGB triple, or None if it has none."""
    for name, nominal, slack in _NAMED_COLOURS:
        if all(abs(value - target) <= (1 if loose else 0)
               for value, target, loose in zip((r, g, b), nominal, slack)):
            return name
    return None


def colour_name(colour: Colour) -> str | None:
    return lookup_colour(colour.r, colour.g, colour.b)


def colour_from_name(name: str) -> Colour:
    """Colour for a TikZ name; raises ValueError for unknown names."""
    key = name.strip().lower()
    for known, (r, g, b), _ in _NAMED_COLOURS:
        if known == key:
            return Colour(r, g, b)
    raise ValueError(f"unknown colour name '{name}'")
