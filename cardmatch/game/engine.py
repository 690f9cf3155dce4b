"""Game engine for a card-matching session."""

from __future__ import annotations

import logging
from typing import Callable

from cardmatch.config import Config
from cardmatch.logging import GameLogger
from cardmatch.levels import LevelConfig
from cardmatch.models.card import Card, CardSnapshot, CardState, Position, Region
from cardmatch.models.registry import CardRegistry
from cardmatch.models.undo import UndoCommand, UndoStack

from .generator import generate_registry
from .mutations import apply_move, apply_state_change, restore_state
from .results import MoveResult, MoveStatus, UndoResult, UndoStatus
from .rules import can_match

logger = logging.getLogger(__name__)


class GameEngine:
    """Owns one session's cards and undo history and applies player intents.

    Every intent runs to completion before returning: the registry already
    holds the new state when callbacks and the game logger are invoked.
    """

    def __init__(
        self,
        config: Config | None = None,
        game_logger: GameLogger | None = None,
    ):
        """Initialize game engine.

        Args:
            config: Configuration (uses defaults if not provided)
            game_logger: GameLogger instance for event logging
        """
        self.config = config or Config()
        self.layout = self.config.layout
        self.game_logger = game_logger

        self.registry = CardRegistry()
        self.undo_stack = UndoStack()
        self.active_card_id: int | None = None
        self.played_ids: set[int] = set()  # Match area cards on the waste pile

        self.level_name = ""
        self.moves_made = 0
        self.undos_applied = 0

        self._on_action: Callable[[str, CardSnapshot], None] | None = None
        self._on_undo: Callable[[CardSnapshot], None] | None = None

    def set_callbacks(
        self,
        on_action: Callable[[str, CardSnapshot], None] | None = None,
        on_undo: Callable[[CardSnapshot], None] | None = None,
    ) -> None:
        """Set event callbacks.

        Args:
            on_action: Called after an accepted move or draw ("move"/"draw", card)
            on_undo: Called after an applied undo (restored card)
        """
        self._on_action = on_action
        self._on_undo = on_undo

    # ------------------------------------------------------------------
    # Session setup
    # ------------------------------------------------------------------

    def start_session(self, level: LevelConfig, name: str = "") -> None:
        """Deal a level and reset the undo history.

        Args:
            level: Level description.
            name: Level name for logs.

        Raises:
            InvalidConfigurationError: If the level has no cards. The current
                session, if any, is left as it was.
        """
        generate_registry(level, self.registry)

        self.undo_stack.clear()
        self.active_card_id = None
        self.played_ids.clear()
        self.level_name = name
        self.moves_made = 0
        self.undos_applied = 0

        self._layout_board()

        logger.info(
            f"Session started: {name or 'level'} with {len(self.registry)} cards, "
            f"active card {self.active_card_id}"
        )
        if self.game_logger:
            self.game_logger.log_session_start(name, self.registry, self.active_card_id)

    def _layout_board(self) -> None:
        """Place dealt cards at their starting positions.

        Match area cards are shifted by the playfield offset. Covered draw
        cards are fanned out from the stock position; the last draw card
        goes to the active slot and becomes the active card.
        """
        for card in self.registry.in_region(Region.MATCH):
            apply_move(card, card.position + self.layout.playfield_offset, card.order)

        stack = self.registry.in_region(Region.DRAW)
        if not stack:
            return

        for i, card in enumerate(stack[:-1]):
            apply_move(card, self.layout.stock_position + self.layout.stock_spacing * i, i)

        top = stack[-1]
        apply_move(top, self.layout.active_position, self.layout.base_order)
        self.active_card_id = top.id

    def end_session(self) -> None:
        """Log session end."""
        logger.info(
            f"Session ended: {self.moves_made} moves, {self.undos_applied} undos"
        )
        if self.game_logger:
            self.game_logger.log_session_end(self.moves_made, self.undos_applied)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_card(self, card_id: int) -> CardSnapshot | None:
        """Get a card snapshot, or None if no card has this id."""
        card = self.registry.lookup(card_id)
        return card.snapshot() if card else None

    def get_active_card(self) -> CardSnapshot | None:
        """Get the active card snapshot, or None if there is none."""
        card = self.registry.lookup(self.active_card_id)
        return card.snapshot() if card else None

    def cards_in_region(self, region: Region) -> list[CardSnapshot]:
        """Get snapshots of a region's cards in paint order."""
        cards = sorted(self.registry.in_region(region), key=lambda c: (c.order, c.id))
        return [c.snapshot() for c in cards]

    def is_played(self, card_id: int) -> bool:
        """Check if a match area card has been played onto the waste pile."""
        return card_id in self.played_ids

    def can_undo(self) -> bool:
        """Check if there is an action to undo."""
        return self.undo_stack.can_undo()

    @property
    def undo_depth(self) -> int:
        """Number of actions that can be undone."""
        return len(self.undo_stack)

    # ------------------------------------------------------------------
    # Intents
    # ------------------------------------------------------------------

    def make_move(self, candidate_id: int) -> MoveResult:
        """Match a match area card against the active card.

        Args:
            candidate_id: Id of the selected card.

        Returns:
            MoveResult. On ACCEPTED the card sits on the active card's
            position with a higher stacking order and is the new active card.
        """
        candidate = self.registry.lookup(candidate_id)
        if candidate is None:
            logger.debug(f"Move: card {candidate_id} not found")
            return MoveResult.not_found(candidate_id)

        active = self.registry.lookup(self.active_card_id)
        if active is None:
            logger.debug(f"Move {candidate}: no active card")
            return MoveResult.rejected("No active card to match against")

        if candidate.region != Region.MATCH or candidate.state != CardState.REVEALED:
            logger.debug(f"Move {candidate}: not a playable match area card")
            return MoveResult.rejected(f"{candidate} is not a playable match area card")

        if candidate.id in self.played_ids:
            logger.debug(f"Move {candidate}: already on the waste pile")
            return MoveResult.rejected(f"{candidate} is already on the waste pile")

        if not can_match(active, candidate):
            logger.debug(f"Move {candidate}: does not match {active}")
            return MoveResult.rejected(f"{candidate} does not match {active}")

        self._record(candidate)
        self.played_ids.add(candidate.id)
        return self._place_on_active(candidate, active.position, "move")

    def draw_from_waste(self, card_id: int) -> MoveResult:
        """Reveal a covered draw pile card and make it the active card.

        Args:
            card_id: Id of the selected draw pile card.

        Returns:
            MoveResult. Rejected unless the card is a hidden draw pile card.
        """
        card = self.registry.lookup(card_id)
        if card is None:
            logger.debug(f"Draw: card {card_id} not found")
            return MoveResult.not_found(card_id)

        if card.region != Region.DRAW or card.state != CardState.HIDDEN:
            logger.debug(f"Draw {card}: not a covered draw pile card")
            return MoveResult.rejected(f"{card} is not a covered draw pile card")

        self._record(card)
        apply_state_change(card, CardState.REVEALED)
        return self._place_on_active(card, self.layout.active_position, "draw")

    def undo(self) -> UndoResult:
        """Revert the most recent accepted action.

        Returns:
            UndoResult. On DATA_CORRUPTION the broken command is dropped and
            the rest of the history stays usable.
        """
        if not self.undo_stack.can_undo():
            return UndoResult(status=UndoStatus.NOTHING_TO_UNDO, message="Nothing to undo")

        cmd = self.undo_stack.pop()

        card = self.registry.lookup(cmd.card_id)
        prev_active = self.registry.lookup(cmd.prev_active_id)
        if card is None or (cmd.prev_active_id is not None and prev_active is None):
            message = (
                f"Undo command references missing card "
                f"(card {cmd.card_id}, previous active {cmd.prev_active_id})"
            )
            logger.error(message)
            if self.game_logger:
                self.game_logger.log_special(
                    "data_corruption",
                    {"card": cmd.card_id, "prev_active": cmd.prev_active_id},
                )
            return UndoResult(status=UndoStatus.DATA_CORRUPTION, message=message)

        apply_move(card, cmd.from_position, cmd.prev_order)
        restore_state(card, cmd.prev_state)
        self.active_card_id = cmd.prev_active_id
        self.played_ids.discard(cmd.card_id)
        self.undos_applied += 1

        snapshot = card.snapshot()
        logger.info(f"Undo {card}: back to {cmd.from_position}, active card {self.active_card_id}")

        if self.game_logger:
            self.game_logger.log_undo(snapshot, self.active_card_id, len(self.undo_stack))
        if self._on_undo:
            self._on_undo(snapshot)

        return UndoResult(status=UndoStatus.APPLIED, card=snapshot)

    def _record(self, card: Card) -> None:
        """Push an undo command for a card about to change."""
        self.undo_stack.push(
            UndoCommand(
                card_id=card.id,
                from_position=card.position,
                prev_active_id=self.active_card_id,
                prev_state=card.state,
                prev_order=card.order,
            )
        )

    def _place_on_active(self, card: Card, target: Position, action: str) -> MoveResult:
        """Put a card on top of the active card and make it active.

        The new order stacks one above the current active card. Sessions
        dealt by start_session always have an active card once a draw card
        exists, so the base order fallback only applies to a registry with
        no active card set.
        """
        prev_active_id = self.active_card_id
        active = self.registry.lookup(prev_active_id)
        new_order = active.order + 1 if active is not None else self.layout.base_order

        apply_move(card, target, new_order)
        self.active_card_id = card.id
        self.moves_made += 1

        logger.info(f"{action.capitalize()} {card}: to {target} (order {new_order})")

        if self.game_logger:
            self.game_logger.log_action(action, card, prev_active_id, len(self.undo_stack))
        if self._on_action:
            self._on_action(action, card.snapshot())

        return MoveResult(status=MoveStatus.ACCEPTED, position=target, order=new_order)
