"""Draws engine renderables onto a pygame surface.

World space is centred on the window with +y up; pygame puts the origin in
the top-left corner with +y down.
"""

from typing import Iterable, Tuple

import pygame

from flappy.color import ColorType
from flappy.simulation.engine import Renderable


def world_to_screen_rect(
    item: Renderable, screen_size: Tuple[int, int]
) -> Tuple[float, float, float, float]:
    """Convert a centre/size box in world space to a pygame ``(x, y, w, h)``."""
    width, height = screen_size
    left = item.position.x - item.size.x / 2.0 + width / 2.0
    top = height / 2.0 - (item.position.y + item.size.y / 2.0)
    return (left, top, item.size.x, item.size.y)


class GameRenderer:
    """Fills the background and draws every renderable as a rectangle."""

    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self.background = ColorType.BACKGROUND.get_color().to_rgba_u8()[:3]

    def draw(self, renderables: Iterable[Renderable]) -> None:
        self.screen.fill(self.background)
        size = self.screen.get_size()
        for item in renderables:
            self._draw_box(item, size)

    def _draw_box(self, item: Renderable, screen_size: Tuple[int, int]) -> None:
        r, g, b, a = item.color.to_rgba_u8()
        if a == 0 or item.size.x <= 0 or item.size.y <= 0:
            return
        rect = pygame.Rect(world_to_screen_rect(item, screen_size))
        if a >= 255:
            pygame.draw.rect(self.screen, (r, g, b), rect)
            return
        # pygame.draw ignores alpha on the display surface
        overlay = pygame.Surface(rect.size)
        overlay.fill((r, g, b))
        overlay.set_alpha(a)
        self.screen.blit(overlay, rect.topleft)
