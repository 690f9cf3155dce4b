"""Game logic."""

from .engine import GameEngine
from .generator import generate_registry
from .mutations import apply_move, apply_state_change, restore_state
from .results import MoveResult, MoveStatus, UndoResult, UndoStatus
from .rules import can_match

__all__ = [
    "GameEngine",
    "MoveResult",
    "MoveStatus",
    "UndoResult",
    "UndoStatus",
    "apply_move",
    "apply_state_change",
    "can_match",
    "generate_registry",
    "restore_state",
]
