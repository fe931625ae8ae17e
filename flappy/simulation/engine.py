"""Game engine - the slim orchestrator.

This module provides the core simulation loop without any embedded game
logic. It owns the entity store, the state machine, the spawn marker and
the RNG, and runs the systems phase by phase.

Design Decisions:
-----------------
1. The engine is a COORDINATOR, not a DOER. Every rule lives in a system
   under ``flappy.systems``; the engine only wires them together.

2. Collaborators are injected: the viewport comes from a provider callable
   sampled once per frame, input arrives as an ``InputState`` snapshot with
   each ``update`` call, and randomness comes from one ``random.Random``.
   A seeded engine replays identically for identical inputs.

3. Pending state transitions are applied at the barrier after each phase.

4. The engine never imports a rendering backend. ``renderables()`` and the
   scoreboard text are everything a frontend needs to draw a frame.
"""

import logging
import random
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from flappy.color import Color
from flappy.components import (
    Bird,
    Highscore,
    Particle,
    Score,
    ScoreTrigger,
    Sprite,
    Text,
    Transform,
)
from flappy.config.game_config import GameConfig
from flappy.entity_factory import spawn_bird, spawn_borders, spawn_scoreboard
from flappy.entity_ids import EntityId
from flappy.exceptions import ViewportUnavailableError
from flappy.game_state import GameState, GameStateMachine
from flappy.input import InputMapper, InputState, KeyBindings
from flappy.math_utils import Vector2
from flappy.simulation.entity_store import EntityStore
from flappy.simulation.frame_context import FrameContext, Viewport
from flappy.systems.explosion import ExplosionSystem
from flappy.systems.input_systems import FlapSystem, RestartSystem, StartCheckSystem
from flappy.systems.lifecycle import BorderSystem, FadeOutSystem, LifetimeSystem, OutOfBoundsSystem
from flappy.systems.physics import GravitySystem, VelocitySystem
from flappy.systems.pillar_collision import PillarCollisionSystem
from flappy.systems.pillar_spawning import PillarSpawningSystem, SpawnerState
from flappy.systems.scoring import HighscoreSystem, ScoreboardSystem, ScoreCollisionSystem
from flappy.update_phases import PHASE_DESCRIPTIONS, PhaseRunner, UpdatePhase

logger = logging.getLogger(__name__)

ViewportProvider = Callable[[], Optional[Viewport]]


@dataclass
class Renderable:
    """Everything a frontend needs to draw one entity."""

    entity: EntityId
    position: Vector2
    size: Vector2
    color: Color
    z: float


class GameEngine:
    """A headless simulation engine for the flappy game.

    Architecture:
        GameEngine (coordinator)
        ├── EntityStore (entities and components)
        ├── GameStateMachine (Started / Running / Over)
        ├── PhaseRunner (systems in phase order)
        ├── SpawnerState (pillar cadence marker)
        └── InputMapper (actions over this frame's keys)

    Attributes:
        config: Game configuration
        store: Entity store
        state_machine: Lifecycle state
        spawner_state: Pillar spawn marker
        rng: Random source for gap positions and particles
        frame_count: Total frames stepped
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        viewport_provider: Optional[ViewportProvider] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        bindings: Optional[KeyBindings] = None,
    ) -> None:
        """Initialize the game engine.

        Args:
            config: Game configuration (defaults are the shipped tuning)
            viewport_provider: Returns the current viewport each frame;
                defaults to a fixed viewport of the configured initial size
            rng: Shared random number generator for deterministic runs
            seed: Optional seed (used if rng is not provided)
            bindings: Key bindings for the player actions

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config = config or GameConfig()
        self.config.validate()

        # RNG handling: prefer explicit rng, then seed, then fresh RNG
        if rng is not None:
            self.rng: random.Random = rng
            self.seed = None
        else:
            self.rng = random.Random(seed)
            self.seed = seed

        if viewport_provider is None:
            fixed = Viewport(self.config.initial_width, self.config.initial_height)
            viewport_provider = lambda: fixed  # noqa: E731
        self._viewport_provider = viewport_provider

        self.frame_count: int = 0
        self.store = EntityStore()
        self.state_machine = GameStateMachine(GameState.STARTED)
        self.spawner_state = SpawnerState()
        self.input = InputMapper(bindings)
        self._setup_done = False
        self._last_viewport: Optional[Viewport] = None

        self.state_machine.on_enter(GameState.STARTED, self._spawn_bird)

        # Systems, in execution order within each phase
        self.border_system = BorderSystem(self)
        self.start_check_system = StartCheckSystem(self)
        self.restart_system = RestartSystem(self)
        self.flap_system = FlapSystem(self)
        self.gravity_system = GravitySystem(self)
        self.velocity_system = VelocitySystem(self)
        self.pillar_spawning_system = PillarSpawningSystem(self)
        self.pillar_collision_system = PillarCollisionSystem(self)
        self.score_collision_system = ScoreCollisionSystem(self)
        self.explosion_system = ExplosionSystem(self)
        self.fade_out_system = FadeOutSystem(self)
        self.lifetime_system = LifetimeSystem(self)
        self.out_of_bounds_system = OutOfBoundsSystem(self)
        self.highscore_system = HighscoreSystem(self)
        self.scoreboard_system = ScoreboardSystem(self)

        self._runner = PhaseRunner()
        for system in (
            self.border_system,
            self.start_check_system,
            self.restart_system,
            self.flap_system,
            self.gravity_system,
            self.velocity_system,
            self.pillar_spawning_system,
            self.pillar_collision_system,
            self.score_collision_system,
            self.explosion_system,
            self.fade_out_system,
            self.lifetime_system,
            self.out_of_bounds_system,
            self.highscore_system,
            self.scoreboard_system,
        ):
            self._runner.register(system)

        logger.info("GameEngine initialized (seed=%s, headless=%s)", self.seed, self.config.headless)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def setup(self) -> None:
        """Create the persistent entities and enter the initial state.

        Raises:
            ViewportUnavailableError: If no usable viewport is available
        """
        if self._setup_done:
            return
        viewport = self._sample_viewport()
        spawn_borders(self.store)
        spawn_scoreboard(self.store)
        self.state_machine.run_enter_hooks()
        self._setup_done = True
        logger.info(
            "Game ready in %s state, viewport %.0fx%.0f",
            self.state.name,
            viewport.width,
            viewport.height,
        )

    def update(self, dt: float, input_state: Optional[InputState] = None) -> None:
        """Step the simulation by one frame.

        Args:
            dt: Seconds since the previous frame; negative values count as 0
            input_state: Keyboard snapshot for this frame (idle if omitted)

        Raises:
            ViewportUnavailableError: If the viewport provider fails
        """
        if not self._setup_done:
            self.setup()
        viewport = self._sample_viewport()
        self.frame_count += 1
        self.input.bind(input_state or InputState.idle())
        ctx = FrameContext(
            frame=self.frame_count,
            dt=max(float(dt), 0.0),
            viewport=viewport,
            input=self.input,
            state_machine=self.state_machine,
        )
        self._runner.run_all(ctx, on_barrier=self._phase_barrier)

    def _phase_barrier(self, phase: UpdatePhase) -> None:
        if self.state_machine.apply_pending():
            logger.debug("Transition applied after %s", PHASE_DESCRIPTIONS[phase].lower())

    def _sample_viewport(self) -> Viewport:
        viewport = self._viewport_provider()
        if viewport is None or not viewport.is_usable():
            raise ViewportUnavailableError(
                f"Viewport unavailable or degenerate: {viewport!r}; "
                "cannot place borders or pillars without window geometry"
            )
        self._last_viewport = viewport
        return viewport

    def _spawn_bird(self) -> None:
        entity = spawn_bird(self.store, self.config.bird, self.config.explosion)
        logger.debug("Spawned bird %s", entity)

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def state(self) -> GameState:
        return self.state_machine.current

    @property
    def viewport(self) -> Optional[Viewport]:
        """Viewport sampled on the most recent frame."""
        return self._last_viewport

    @property
    def bird(self) -> Optional[EntityId]:
        match = self.store.single(Bird)
        return match[0] if match else None

    @property
    def score(self) -> int:
        match = self.store.single(Score)
        return match[1].value if match else 0

    @property
    def highscore(self) -> int:
        match = self.store.single(Highscore)
        return match[1].value if match else 0

    @property
    def score_text(self) -> str:
        return self._text_for(Score)

    @property
    def highscore_text(self) -> str:
        return self._text_for(Highscore)

    def _text_for(self, counter_type: type) -> str:
        for _, (text, _counter) in self.store.query(Text, counter_type):
            return text.value
        return "0"

    def texts(self) -> List[Text]:
        """Scoreboard text displays, score first."""
        return [text for _, (text, _) in self.store.query(Text, Score)] + [
            text for _, (text, _) in self.store.query(Text, Highscore)
        ]

    def count(self, *component_types: type) -> int:
        """Number of live entities carrying every given component type."""
        return len(self.store.query(*component_types))

    def renderables(self) -> List[Renderable]:
        """Visual entities, back to front."""
        items = [
            Renderable(entity, transform.translation, sprite.size, sprite.color, transform.z)
            for entity, (transform, sprite) in self.store.query(Transform, Sprite)
        ]
        items.sort(key=lambda item: item.z)
        return items

    def get_stats(self) -> Dict[str, Any]:
        """Summary used by the headless runner's periodic log line."""
        return {
            "frame": self.frame_count,
            "state": self.state.name,
            "score": self.score,
            "highscore": self.highscore,
            "entities": len(self.store),
            "pillar_pairs": self.pillar_spawning_system.pairs_spawned,
            "triggers": self.count(ScoreTrigger),
            "particles": self.count(Particle),
        }

    def get_debug_info(self) -> Dict[str, Any]:
        return {
            "stats": self.get_stats(),
            "runner": self._runner.get_debug_info(),
            "systems": [system.get_debug_info() for system in self._runner.get_all()],
        }
