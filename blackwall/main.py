from __future__ import annotations

import argparse
import logging
import signal

from .constants import LOG_FILE, SAVE_PATH
from .game import Game

logger = logging.getLogger(__name__)


def install_signal_handlers(game: Game) -> None:
    """Stop the main loop on SIGINT/SIGTERM instead of raising mid-frame."""

    def _stop(signum, frame) -> None:
        logger.info("received signal %d, shutting down", signum)
        game.running = False

    signal.signal(signal.SIGINT, _stop)
    signal.signal(signal.SIGTERM, _stop)


def main(argv: list[str] | None = None) -> None:
    """Entry point parsed from command line."""
    parser = argparse.ArgumentParser(description="Run BlackWall Breach")
    parser.add_argument(
        "--save-file", default=SAVE_PATH, help="Path of the save file"
    )
    parser.add_argument(
        "--no-load", action="store_true", help="Start fresh instead of loading"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for data cache timing"
    )
    parser.add_argument(
        "--show-fps", action="store_true", help="Display FPS/tick timing"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )
    parser.add_argument(
        "--log-file", default=LOG_FILE, help="Where log records are written"
    )
    args = parser.parse_args(argv)

    # Log to a file; stderr output would tear the full-screen display.
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        filename=args.log_file,
    )

    game = Game(seed=args.seed, save_path=args.save_file)
    if not args.no_load:
        game.load_game()
    install_signal_handlers(game)
    try:
        game.run(show_fps=args.show_fps)
    finally:
        game.save_game(notify=False)


if __name__ == "__main__":
    main()
