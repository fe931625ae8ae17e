"""Color values and the game palette.

Design Note:
    These are plain value types with no simulation dependencies. Channels
    are stored as floats in 0.0-1.0 so alpha fades are frame-rate
    independent; the frontend converts to 0-255 when drawing.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass
class Color:
    """RGBA color with float channels in the range 0.0-1.0."""

    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def from_rgb_u8(cls, r: int, g: int, b: int) -> "Color":
        """Build an opaque color from 0-255 channel values.

        Example:
            >>> Color.from_rgb_u8(255, 0, 0)
            Color(r=1.0, g=0.0, b=0.0, a=1.0)
        """
        return cls(r / 255.0, g / 255.0, b / 255.0, 1.0)

    def copy(self) -> "Color":
        return Color(self.r, self.g, self.b, self.a)

    def fade(self, amount: float) -> None:
        """Lower alpha by ``amount`` in-place, never below zero."""
        self.a = max(0.0, self.a - amount)

    def to_rgba_u8(self) -> tuple[int, int, int, int]:
        """Return the color as a 0-255 ``(R, G, B, A)`` tuple."""
        return (
            _channel_to_u8(self.r),
            _channel_to_u8(self.g),
            _channel_to_u8(self.b),
            _channel_to_u8(self.a),
        )


def _channel_to_u8(value: float) -> int:
    return int(round(min(1.0, max(0.0, value)) * 255))


class ColorType(Enum):
    """Named palette entries. Hardcode color values here."""

    PILLAR = (255, 180, 84)
    BIRD = (89, 194, 255)
    BACKGROUND = (13, 16, 22)
    LASER = (240, 46, 46)
    SCORE = (149, 230, 203)

    def get_color(self) -> Color:
        """Return a fresh, independently mutable Color for this entry."""
        return Color.from_rgb_u8(*self.value)
