"""Main entry point for the terminal game."""

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from cardmatch.config import load_config
from cardmatch.errors import InvalidConfigurationError
from cardmatch.game.engine import GameEngine
from cardmatch.levels import level_path, load_level
from cardmatch.logging import GameLogConfig, GameLogger
from cardmatch.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)


def run_command(engine: GameEngine, display: GameDisplay, line: str) -> bool:
    """Dispatch one input line to the engine.

    Args:
        engine: Running game engine.
        display: Output display.
        line: Raw input line.

    Returns:
        False if the player asked to quit, True otherwise.
    """
    parts = line.split()
    if not parts:
        return True

    command = parts[0].lower()
    if command in ("q", "quit"):
        return False

    if command in ("u", "undo"):
        display.print_undo_result(engine.undo())
        display.print_board_if_enabled(engine)
        return True

    if command in ("b", "board"):
        display.print_board(engine)
        return True

    if command in ("m", "move", "d", "draw"):
        if len(parts) != 2 or not parts[1].lstrip("-").isdigit():
            print(f"Usage: {command} <card id>")
            return True
        card_id = int(parts[1])
        if command in ("m", "move"):
            display.print_move_result("move", engine.make_move(card_id))
        else:
            display.print_move_result("draw", engine.draw_from_waste(card_id))
        display.print_board_if_enabled(engine)
        return True

    display.print_help()
    return True


def play(engine: GameEngine, display: GameDisplay, stream: TextIO) -> None:
    """Read commands from a stream until quit or end of input."""
    display.print_help()
    display.print_board(engine)
    for line in stream:
        if not run_command(engine, display, line):
            break


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    parser = argparse.ArgumentParser(
        description="Single-player card matching game"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-l",
        "--level",
        type=int,
        default=1,
        help="Level number to play",
    )
    parser.add_argument(
        "--levels-dir",
        type=Path,
        help="Directory holding level_<n>.json files (overrides config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--show-board",
        action="store_true",
        help="Print the board after every action",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Path of the JSONL game event log",
    )

    args = parser.parse_args()

    # Load config
    config = load_config(args.config)

    # Apply command-line overrides
    if args.levels_dir:
        config.levels_dir = str(args.levels_dir)
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.show_board:
        config.logging.show_board = True
    if args.game_log:
        config.game_log = GameLogConfig(enabled=True, output_path=str(args.game_log))

    # Setup logging
    setup_logging(config.logging.level)

    display = GameDisplay(show_board=config.logging.show_board)

    path = level_path(config.levels_dir, args.level)
    level = load_level(path)

    with GameLogger(config.game_log) as game_logger:
        engine = GameEngine(config, game_logger)
        try:
            engine.start_session(level, name=path.stem)
        except InvalidConfigurationError as e:
            logger.error(f"Cannot start level {args.level}: {e}")
            return 1

        display.print_session_start(path.stem, len(engine.registry))

        try:
            play(engine, display, sys.stdin)
        except KeyboardInterrupt:
            print("\nInterrupted by user")
        finally:
            engine.end_session()

    return 0


if __name__ == "__main__":
    sys.exit(main())
