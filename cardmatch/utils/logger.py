"""Logging utilities and board display."""

import logging
import sys
from typing import TYPE_CHECKING

from cardmatch.models.card import CardState, Region

if TYPE_CHECKING:
    from cardmatch.game.engine import GameEngine
    from cardmatch.game.results import MoveResult, UndoResult
    from cardmatch.models.card import CardSnapshot


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


class GameDisplay:
    """Display session state to stdout."""

    def __init__(self, show_board: bool = False):
        """Initialize display.

        Args:
            show_board: Whether to print the board after every action
        """
        self.show_board = show_board

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def print_session_start(self, name: str, num_cards: int) -> None:
        """Print session start message."""
        self.print_separator()
        print(f"LEVEL {name} ({num_cards} cards)")
        self.print_separator()

    def format_card(self, card: "CardSnapshot") -> str:
        """Format a card for the board listing."""
        if card.state == CardState.HIDDEN:
            return f"#{card.id} [##]"
        if card.state == CardState.REMOVED:
            return f"{card} (removed)"
        return str(card)

    def print_board(self, engine: "GameEngine") -> None:
        """Print both regions and the active card."""
        active = engine.get_active_card()
        print(f"Active: {active if active else '-'}")

        match_cards = [
            c for c in engine.cards_in_region(Region.MATCH)
            if not engine.is_played(c.id)
        ]
        print("Match area:")
        print("  " + ("  ".join(self.format_card(c) for c in match_cards) or "-"))

        draw_cards = [
            c for c in engine.cards_in_region(Region.DRAW)
            if c.state == CardState.HIDDEN
        ]
        print("Draw pile:")
        print("  " + ("  ".join(self.format_card(c) for c in draw_cards) or "-"))
        print(f"Undo: {engine.undo_depth}")

    def print_board_if_enabled(self, engine: "GameEngine") -> None:
        """Print the board if show_board is enabled."""
        if self.show_board:
            self.print_board(engine)

    def print_move_result(self, action: str, result: "MoveResult") -> None:
        """Print the outcome of a move or draw."""
        if result.accepted:
            print(f"  -> {action}: accepted (order {result.order})")
        else:
            print(f"  -> {action}: {result.status.value} ({result.message})")

    def print_undo_result(self, result: "UndoResult") -> None:
        """Print the outcome of an undo."""
        if result.applied:
            print(f"  -> undo: restored {result.card}")
        else:
            print(f"  -> undo: {result.status.value}")

    def print_help(self) -> None:
        """Print available commands."""
        print("Commands: m <id> (match), d <id> (draw), u (undo), b (board), q (quit)")
