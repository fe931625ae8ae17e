"""Centralized math utilities for the simulation.

Pure Python 2D vector used for positions, sizes and velocities. World space
is centred on the viewport with +y pointing up.
"""

from __future__ import annotations

import math
import random


class Vector2:
    """A 2D vector class for mathematical operations."""

    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x: float = float(x)
        self.y: float = float(y)

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> "Vector2":
        """Return a unit vector, or the zero vector for a zero-length input."""
        length = math.sqrt(self.x * self.x + self.y * self.y)
        if length == 0:
            return Vector2(0, 0)
        return Vector2(self.x / length, self.y / length)

    def copy(self) -> "Vector2":
        """Return a copy of this vector."""
        return Vector2(self.x, self.y)

    def add_scaled_inplace(self, other: "Vector2", scalar: float) -> "Vector2":
        """Add ``other * scalar`` to this vector in-place (Euler step)."""
        self.x += other.x * scalar
        self.y += other.y * scalar
        return self

    def __eq__(self, other: object) -> bool:
        """Check if two vectors are equal."""
        if other.__class__ is not Vector2:
            return False
        return abs(self.x - other.x) < 1e-9 and abs(self.y - other.y) < 1e-9

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __repr__(self) -> str:
        return f"Vector2({self.x}, {self.y})"


def sample_range(rng: random.Random, low: float, high: float) -> float:
    """Draw uniformly from the half-open interval ``[low, high)``.

    ``low + (high - low) * rng.random()`` can round up to ``high``; such a
    draw is pulled back to the largest float below it.
    """
    value = low + (high - low) * rng.random()
    if value >= high:
        return math.nextafter(high, low)
    return value


__all__ = ["Vector2", "sample_range"]
