"""Tests for Vector2 and Color value types."""

import math

import pytest

from flappy.color import Color, ColorType
from flappy.math_utils import Vector2, sample_range


class TestVector2:
    def test_arithmetic(self):
        assert Vector2(1, 2) + Vector2(3, 4) == Vector2(4, 6)
        assert Vector2(3, 4) - Vector2(1, 1) == Vector2(2, 3)
        assert Vector2(1, 2) * 3 == Vector2(3, 6)
        assert 3 * Vector2(1, 2) == Vector2(3, 6)

    def test_normalize(self):
        v = Vector2(3, 4).normalize()
        assert v.length() == pytest.approx(1.0)
        assert v == Vector2(0.6, 0.8)

    def test_normalize_zero_vector_is_zero(self):
        assert Vector2(0, 0).normalize() == Vector2(0, 0)

    def test_add_scaled_inplace(self):
        v = Vector2(1, 1)
        v.add_scaled_inplace(Vector2(2, -4), 0.5)
        assert v == Vector2(2, -1)

    def test_copy_is_independent(self):
        v = Vector2(1, 1)
        c = v.copy()
        c.x = 5
        assert v.x == 1


class TestColor:
    def test_fade_clamps_at_zero(self):
        color = Color(1.0, 1.0, 1.0, 0.2)
        color.fade(0.5)
        assert color.a == 0.0

    def test_to_rgba_u8(self):
        assert Color(1.0, 0.0, 0.5, 1.0).to_rgba_u8() == (255, 0, 128, 255)

    def test_palette_entries_are_independent(self):
        """Test that fading one palette color does not affect later lookups."""
        first = ColorType.LASER.get_color()
        first.fade(1.0)
        assert ColorType.LASER.get_color().a == 1.0

    def test_palette_values(self):
        assert ColorType.BIRD.get_color().to_rgba_u8()[:3] == (89, 194, 255)
        assert math.isclose(ColorType.PILLAR.get_color().g, 180 / 255.0)


class _TopOfRangeRng:
    """Returns the largest value ``random()`` can produce."""

    def random(self):
        return 1.0 - 2.0**-53


class TestSampleRange:
    def test_stays_below_upper_bound(self):
        value = sample_range(_TopOfRangeRng(), 0.2, 0.8)
        assert 0.2 <= value < 0.8

    def test_lower_bound_reachable(self):
        class _ZeroRng:
            def random(self):
                return 0.0

        assert sample_range(_ZeroRng(), 300.0, 850.0) == 300.0

    def test_seeded_draws_in_range(self, seeded_rng):
        for _ in range(200):
            assert 0.1 <= sample_range(seeded_rng, 0.1, 1.0) < 1.0

    def test_gap_fraction_half_open(self):
        from flappy.config.game_config import PillarConfig
        from flappy.simulation.frame_context import Viewport
        from flappy.systems.pillar_spawning import SpawnerState, plan_pillar_pair

        plan = plan_pillar_pair(
            SpawnerState(), Viewport(800.0, 600.0), 0.0, _TopOfRangeRng(), PillarConfig()
        )
        assert plan.gap_fraction < 0.8

    def test_particle_draws_half_open(self):
        from flappy.components import Explodes
        from flappy.systems.explosion import draw_particles

        explodes = Explodes(
            particle_color=Color(1.0, 1.0, 1.0),
            particle_count=3,
            particle_speed_range=(300.0, 850.0),
            particle_lifetime_range=(0.1, 1.0),
            particle_size_fraction_range=(0.05, 0.5),
        )
        for draw in draw_particles(explodes, Vector2(27.0, 27.0), _TopOfRangeRng()):
            assert draw.lifetime < 1.0
