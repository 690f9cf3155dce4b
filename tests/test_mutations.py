"""Tests for card mutation operations."""

import pytest

from cardmatch.errors import IllegalTransitionError
from cardmatch.game.mutations import (
    apply_move,
    apply_state_change,
    is_legal_transition,
    restore_state,
)
from cardmatch.models.card import Card, CardState, Position, Rank, Region


@pytest.fixture
def card():
    return Card(id=0, rank=Rank.FIVE, region=Region.DRAW, state=CardState.HIDDEN)


class TestApplyMove:
    """Tests for apply_move."""

    def test_sets_position_and_order(self, card):
        apply_move(card, Position(x=690, y=290), 101)
        assert card.position == Position(x=690, y=290)
        assert card.order == 101

    def test_keeps_state_and_origin(self, card):
        apply_move(card, Position(x=1, y=1), 5)
        assert card.state == CardState.HIDDEN
        assert card.origin.is_zero()


class TestApplyStateChange:
    """Tests for forward state transitions."""

    def test_reveal(self, card):
        apply_state_change(card, CardState.REVEALED)
        assert card.state == CardState.REVEALED

    def test_remove_after_reveal(self, card):
        apply_state_change(card, CardState.REVEALED)
        apply_state_change(card, CardState.REMOVED)
        assert card.state == CardState.REMOVED

    def test_same_state_is_noop(self, card):
        apply_state_change(card, CardState.HIDDEN)
        assert card.state == CardState.HIDDEN

    def test_skip_rejected(self, card):
        """Test that hidden cards cannot be removed directly."""
        with pytest.raises(IllegalTransitionError):
            apply_state_change(card, CardState.REMOVED)
        assert card.state == CardState.HIDDEN

    def test_backwards_rejected(self, card):
        apply_state_change(card, CardState.REVEALED)
        with pytest.raises(IllegalTransitionError):
            apply_state_change(card, CardState.HIDDEN)
        assert card.state == CardState.REVEALED

    def test_transition_table(self):
        assert is_legal_transition(CardState.HIDDEN, CardState.REVEALED)
        assert is_legal_transition(CardState.REVEALED, CardState.REMOVED)
        assert not is_legal_transition(CardState.REMOVED, CardState.REVEALED)
        assert not is_legal_transition(CardState.REVEALED, CardState.HIDDEN)


class TestRestoreState:
    """Tests for the undo restore path."""

    def test_any_state_restorable(self, card):
        for state in (CardState.REVEALED, CardState.REMOVED, CardState.HIDDEN):
            restore_state(card, state)
            assert card.state == state
