"""RGB colour value used for node fills, outlines and edge lines."""

import re
from dataclasses import dataclass

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")


def _clamp_channel(value: int) -> int:
    return max(0, min(255, int(value)))


@dataclass(frozen=True)
class Colour:
    """An 8-bit RGB triple."""
    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self):
        for channel in ("r", "g", "b"):
            object.__setattr__(self, channel, _clamp_channel(getattr(self, channel)))

    @classmethod
    def from_fractions(cls, r: float, g: float, b: float) -> "Colour":
        """Build a colour from channel fractions in [0, 1]."""
        return cls(round(r * 255), round(g * 255), round(b * 255))

    @classmethod
    def parse(cls, value) -> "Colour":
        """Parse '#rrggbb', 'r,g,b', a 3-sequence or a {'r','g','b'} mapping."""
        if isinstance(value, Colour):
            return value
        if isinstance(value, dict):
            return cls(value.get("r", 0), value.get("g", 0), value.get("b", 0))
        if isinstance(value, (list, tuple)):
            if len(value) != 3:
                raise ValueError(f"colour needs 3 channels, got {len(value)}")
            return cls(*(int(v) for v in value))
        if isinstance(value, str):
            text = value.strip()
            match = _HEX_RE.match(text)
            if match:
                digits = match.group(1)
                return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
            parts = [p.strip() for p in text.split(",")]
            if len(parts) == 3 and all(p.isdigit() for p in parts):
                return cls(*(int(p) for p in parts))
        raise ValueError(f"cannot parse colour: {value!r}")

    def fractions(self) -> tuple[float, float, float]:
        return (self.r / 255, self.g / 255, self.b / 255)

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def __iter__(self):
        return iter((self.r, self.g, self.b))


BLACK = Colour(0, 0, 0)
WHITE = Colour(255, 255, 255)
