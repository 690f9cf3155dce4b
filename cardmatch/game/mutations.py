"""State-changing operations on a single card.

These functions never check game rules. The engine calls them only after
a move was accepted, or while restoring an undo command.
"""

from cardmatch.errors import IllegalTransitionError
from cardmatch.models.card import Card, CardState, Position

# Forward transitions a player action may cause
ALLOWED_TRANSITIONS: dict[CardState, frozenset[CardState]] = {
    CardState.HIDDEN: frozenset({CardState.REVEALED}),  # draw
    CardState.REVEALED: frozenset({CardState.REMOVED}),  # played out
    CardState.REMOVED: frozenset(),
}


def is_legal_transition(current: CardState, new: CardState) -> bool:
    """Check a forward state transition against the table."""
    return current == new or new in ALLOWED_TRANSITIONS[current]


def apply_move(card: Card, target: Position, new_order: int) -> None:
    """Place a card at a position with a new stacking order."""
    card.position = target
    card.order = new_order


def apply_state_change(card: Card, new_state: CardState) -> None:
    """Change a card's visibility through a forward transition.

    Args:
        card: Card to change.
        new_state: Target state.

    Raises:
        IllegalTransitionError: If the transition is not in the table. The
            card is left untouched.
    """
    if not is_legal_transition(card.state, new_state):
        raise IllegalTransitionError(
            f"Card {card.id}: {card.state.value} -> {new_state.value} is not allowed"
        )
    card.state = new_state


def restore_state(card: Card, prev_state: CardState) -> None:
    """Set any recorded state back on a card (undo path only)."""
    card.state = prev_state
