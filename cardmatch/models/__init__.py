"""Game models."""

from .card import Card, CardSnapshot, CardState, Position, Rank, Region, Suit
from .registry import CardRegistry
from .undo import EmptyUndoStackError, UndoCommand, UndoStack

__all__ = [
    "Card",
    "CardSnapshot",
    "CardState",
    "Position",
    "Rank",
    "Region",
    "Suit",
    "CardRegistry",
    "EmptyUndoStackError",
    "UndoCommand",
    "UndoStack",
]
