"""Axis-aligned box overlap tests.

Boxes are given as centre + size, the way sprites are stored. Overlap is
strict on both axes: boxes that only share an edge do not collide, and a
box with zero width or height collides with nothing.
"""

from flappy.math_utils import Vector2


def collide_aabb(a_pos: Vector2, a_size: Vector2, b_pos: Vector2, b_size: Vector2) -> bool:
    """Check if two centre/size boxes overlap.

    Args:
        a_pos: Centre of the first box
        a_size: Width and height of the first box
        b_pos: Centre of the second box
        b_size: Width and height of the second box

    Returns:
        True if the boxes intersect on both axes
    """
    if a_size.x <= 0 or a_size.y <= 0 or b_size.x <= 0 or b_size.y <= 0:
        return False
    a_half_w, a_half_h = a_size.x / 2.0, a_size.y / 2.0
    b_half_w, b_half_h = b_size.x / 2.0, b_size.y / 2.0
    return (
        a_pos.x - a_half_w < b_pos.x + b_half_w
        and a_pos.x + a_half_w > b_pos.x - b_half_w
        and a_pos.y - a_half_h < b_pos.y + b_half_h
        and a_pos.y + a_half_h > b_pos.y - b_half_h
    )


__all__ = ["collide_aabb"]
