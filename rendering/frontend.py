"""Interactive pygame frontend for the flappy core.

Supplies the engine's collaborators: frame time from ``pygame.time.Clock``,
the viewport from the window surface, and an ``InputState`` built from the
frame's key events.
"""

import logging
from typing import Optional, Set

import pygame

from flappy.config.display import (
    FRAME_RATE,
    RESIZABLE,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    VSYNC,
    WINDOW_TITLE,
)
from flappy.input import InputState
from flappy.simulation.engine import GameEngine
from flappy.simulation.frame_context import Viewport
from rendering.game_renderer import GameRenderer
from rendering.ui_renderer import UIRenderer

logger = logging.getLogger(__name__)


class FlappyWindow:
    """Owns the pygame window and runs the frame loop.

    Attributes:
        engine: The simulation being displayed
        screen: Pygame display surface (None until setup)
        clock: Pygame clock for frame timing
        running: False once the window has been closed
    """

    def __init__(self, engine: Optional[GameEngine] = None, seed: Optional[int] = None) -> None:
        self.screen: Optional[pygame.Surface] = None
        self.clock: Optional[pygame.time.Clock] = None
        self.game_renderer: Optional[GameRenderer] = None
        self.ui_renderer: Optional[UIRenderer] = None
        self.running = False
        self.engine = engine or GameEngine(
            seed=seed,
            viewport_provider=self.current_viewport,
        )
        self.engine.config = self.engine.config.with_overrides(headless=False)

    def current_viewport(self) -> Optional[Viewport]:
        if self.screen is None:
            return None
        width, height = self.screen.get_size()
        return Viewport(float(width), float(height))

    def setup_game(self) -> None:
        """Open the window and prepare the engine.

        Raises:
            pygame.error: If no display is available
        """
        pygame.init()
        flags = pygame.RESIZABLE if RESIZABLE else 0
        size = (int(SCREEN_WIDTH), int(SCREEN_HEIGHT))
        try:
            self.screen = pygame.display.set_mode(size, flags, vsync=1 if VSYNC else 0)
        except (TypeError, pygame.error):
            # vsync kwarg unsupported or refused by the driver; retry without it
            logger.warning("VSync unavailable, continuing without it")
            self.screen = pygame.display.set_mode(size, flags)
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()
        self.game_renderer = GameRenderer(self.screen)
        self.ui_renderer = UIRenderer(self.screen)
        self.engine.setup()
        self.running = True

    def poll_input(self) -> InputState:
        """Drain the event queue into a keyboard snapshot for this frame."""
        pressed: Set[str] = set()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                pressed.add(pygame.key.name(event.key))
            elif event.type == pygame.VIDEORESIZE:
                # set_mode surfaces track resizes in pygame 2; rebind anyway
                self.screen = pygame.display.get_surface()
                self.game_renderer.screen = self.screen
                self.ui_renderer.screen = self.screen

        keys = pygame.key.get_pressed()
        held = {name for name in self.engine.input.bindings.keys() if keys[pygame.key.key_code(name)]}
        return InputState(held=frozenset(held | pressed), pressed=frozenset(pressed))

    def render(self) -> None:
        self.game_renderer.draw(self.engine.renderables())
        self.ui_renderer.draw_scoreboard(self.engine.texts())
        self.ui_renderer.draw_state_hint(self.engine.state)
        pygame.display.flip()

    def run(self) -> None:  # pragma: no cover - visual
        self.setup_game()
        try:
            while self.running:
                dt = self.clock.tick(FRAME_RATE) / 1000.0
                input_state = self.poll_input()
                if not self.running:
                    break
                self.engine.update(dt, input_state)
                self.render()
        finally:
            pygame.quit()
