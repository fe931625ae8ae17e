"""Main entry point for the flappy simulation.

This module provides command-line options to run the game:
- Window mode (default): interactive pygame window
- Headless mode: scripted input, stats only, for smoke runs and profiling
"""

import argparse
import logging
import sys

from flappy.exceptions import ViewportUnavailableError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s:%(name)s:%(message)s",
)

logger = logging.getLogger(__name__)


def run_window(seed=None):
    """Run the game in a pygame window."""
    try:
        import pygame

        from rendering.frontend import FlappyWindow
    except ImportError as e:
        logger.error("Error: Required dependencies not installed: %s", e)
        logger.error("Install with: pip install -e .")
        sys.exit(1)

    try:
        FlappyWindow(seed=seed).run()
    except (pygame.error, ViewportUnavailableError) as e:
        logger.error("Cannot run the game window: %s", e)
        sys.exit(1)


def run_headless(max_frames: int, stats_interval: int, seed=None, flap_interval: int = 45):
    """Run the simulation in headless mode (no window).

    Args:
        max_frames: Number of frames to simulate
        stats_interval: Print stats every N frames
        seed: Optional random seed for deterministic behavior
        flap_interval: Scripted flap every N running frames
    """
    from flappy.config.game_config import GameConfig
    from flappy.headless import HeadlessRunner
    from flappy.simulation.engine import GameEngine

    engine = GameEngine(config=GameConfig(headless=True), seed=seed)
    runner = HeadlessRunner(engine, flap_interval=flap_interval)
    try:
        runner.run(max_frames=max_frames, stats_interval=stats_interval)
    except ViewportUnavailableError as e:
        logger.error("Simulation aborted: %s", e)
        sys.exit(1)


def main():
    """Parse command-line arguments and run the appropriate mode."""
    parser = argparse.ArgumentParser(
        description="Flappy Bird Simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Play in a window (default)
  python main.py

  # Run headless with scripted input
  python main.py --headless --max-frames 10000 --stats-interval 500

  # Reproducible headless run flapping every 18 frames
  python main.py --headless --seed 42 --flap-interval 18
        """,
    )

    parser.add_argument(
        "--headless", action="store_true", help="Run in headless mode (no window, stats only)"
    )

    parser.add_argument(
        "--max-frames",
        type=int,
        default=10000,
        help="Frames to simulate in headless mode (default: 10000)",
    )

    parser.add_argument(
        "--stats-interval",
        type=int,
        default=300,
        help="Print stats every N frames in headless mode (default: 300)",
    )

    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for deterministic behavior (optional)"
    )

    parser.add_argument(
        "--flap-interval",
        type=int,
        default=45,
        help="Scripted flap every N running frames in headless mode (default: 45)",
    )

    args = parser.parse_args()

    if args.headless:
        if args.flap_interval <= 0:
            parser.error("--flap-interval must be positive")
        logger.info("Starting headless simulation...")
        logger.info(
            "Configuration: %d frames, stats every %d frames", args.max_frames, args.stats_interval
        )
        logger.info("")
        run_headless(
            args.max_frames, args.stats_interval, seed=args.seed, flap_interval=args.flap_interval
        )
    else:
        run_window(seed=args.seed)


if __name__ == "__main__":
    main()
