"""Results returned by the engine's intent handlers."""

from dataclasses import dataclass
from enum import Enum

from cardmatch.models.card import CardSnapshot, Position


class MoveStatus(str, Enum):
    """Outcome of a move or draw intent."""

    ACCEPTED = "accepted"
    REJECTED = "rejected"  # Rule failed or card not eligible
    NOT_FOUND = "not_found"  # No card with that id


class UndoStatus(str, Enum):
    """Outcome of an undo request."""

    APPLIED = "applied"
    NOTHING_TO_UNDO = "nothing_to_undo"
    DATA_CORRUPTION = "data_corruption"  # Command referenced a missing card


@dataclass
class MoveResult:
    """Result of make_move / draw_from_waste."""

    status: MoveStatus
    position: Position | None = None
    order: int | None = None
    message: str = ""

    @property
    def accepted(self) -> bool:
        return self.status == MoveStatus.ACCEPTED

    @classmethod
    def rejected(cls, message: str) -> "MoveResult":
        return cls(status=MoveStatus.REJECTED, message=message)

    @classmethod
    def not_found(cls, card_id: int) -> "MoveResult":
        return cls(status=MoveStatus.NOT_FOUND, message=f"No card with id {card_id}")


@dataclass
class UndoResult:
    """Result of undo."""

    status: UndoStatus
    card: CardSnapshot | None = None  # Restored card when applied
    message: str = ""

    @property
    def applied(self) -> bool:
        return self.status == UndoStatus.APPLIED
