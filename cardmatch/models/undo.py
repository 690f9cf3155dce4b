"""Undo history models."""

from pydantic import BaseModel

from cardmatch.errors import EmptyUndoStackError

from .card import CardState, Position

__all__ = ["EmptyUndoStackError", "UndoCommand", "UndoStack"]


class UndoCommand(BaseModel, frozen=True):
    """Snapshot taken right before a move or draw is applied.

    Holds everything needed to put the card and the active card
    reference back to where they were.
    """

    card_id: int
    from_position: Position
    prev_active_id: int | None  # None when no card was active
    prev_state: CardState
    prev_order: int


class UndoStack:
    """LIFO history of undo commands, one per accepted action."""

    def __init__(self) -> None:
        self._history: list[UndoCommand] = []

    def push(self, cmd: UndoCommand) -> None:
        """Record a command."""
        self._history.append(cmd)

    def can_undo(self) -> bool:
        """Check if there is anything to undo."""
        return bool(self._history)

    def pop(self) -> UndoCommand:
        """Remove and return the most recent command.

        Returns:
            The most recent UndoCommand.

        Raises:
            EmptyUndoStackError: If the stack is empty. Callers should check
                can_undo() first.
        """
        if not self._history:
            raise EmptyUndoStackError("Undo stack is empty")
        return self._history.pop()

    def peek(self) -> UndoCommand | None:
        """Get the most recent command without removing it."""
        return self._history[-1] if self._history else None

    def clear(self) -> None:
        """Drop the whole history (new session)."""
        self._history.clear()

    def __len__(self) -> int:
        return len(self._history)
