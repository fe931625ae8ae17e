"""UI rendering for the scoreboard and state hints.

Draws the score and highscore text the engine keeps up to date, plus a short
prompt on the start and game-over screens.
"""

from typing import Dict, List, Tuple

import pygame

from flappy.components import Text
from flappy.game_state import GameState

HINT_COLOR = (150, 150, 150)
HINT_FONT_SIZE = 28
HINTS = {
    GameState.STARTED: "Press SPACE to start",
    GameState.OVER: "Hold SPACE to restart",
}


class UIRenderer:
    """Renders scoreboard text centred along the top of the screen.

    Attributes:
        screen: Pygame surface to render to
    """

    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self._fonts: Dict[int, pygame.font.Font] = {}

    def _font(self, size: float) -> pygame.font.Font:
        key = int(size)
        if key not in self._fonts:
            self._fonts[key] = pygame.font.Font(None, key)
        return self._fonts[key]

    def draw_scoreboard(self, texts: List[Text]) -> None:
        """Draw each display centred horizontally at its top offset."""
        for text in texts:
            color: Tuple[int, int, int, int] = text.color.to_rgba_u8()
            surface = self._font(text.font_size).render(text.value, True, color[:3])
            x = self.screen.get_width() // 2 - surface.get_width() // 2
            self.screen.blit(surface, (x, int(text.top_offset)))

    def draw_state_hint(self, state: GameState) -> None:
        hint = HINTS.get(state)
        if hint is None:
            return
        surface = self._font(HINT_FONT_SIZE).render(hint, True, HINT_COLOR)
        x = self.screen.get_width() // 2 - surface.get_width() // 2
        y = self.screen.get_height() - 80 - surface.get_height()
        self.screen.blit(surface, (x, y))
