"""Tests for world-to-screen conversion in the pygame renderer."""

import pytest

pytest.importorskip("pygame")

from flappy.color import Color  # noqa: E402
from flappy.entity_ids import EntityId  # noqa: E402
from flappy.math_utils import Vector2  # noqa: E402
from flappy.simulation.engine import Renderable  # noqa: E402
from rendering.game_renderer import world_to_screen_rect  # noqa: E402


def _box(x, y, w, h):
    return Renderable(EntityId(0), Vector2(x, y), Vector2(w, h), Color(1.0, 1.0, 1.0), 0.0)


class TestWorldToScreen:
    def test_origin_maps_to_screen_centre(self):
        assert world_to_screen_rect(_box(0, 0, 10, 10), (800, 600)) == (395.0, 295.0, 10, 10)

    def test_y_axis_is_flipped(self):
        """Test that a box above the origin lands in the upper half."""
        _, top, _, _ = world_to_screen_rect(_box(0, 200, 10, 10), (800, 600))
        assert top == 95.0

    def test_roof_strip_touches_top_edge(self):
        left, top, width, height = world_to_screen_rect(_box(0, 300, 800, 40), (800, 600))
        assert (left, top) == (0.0, -20.0)
        assert (width, height) == (800, 40)
