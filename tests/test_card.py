"""Tests for card models."""

import pytest
from pydantic import ValidationError

from cardmatch.models.card import (
    ZERO,
    Card,
    CardState,
    Position,
    Rank,
    Region,
    Suit,
    region_for_origin,
)


class TestPosition:
    """Tests for Position class."""

    def test_zero(self):
        """Test zero vector detection."""
        assert ZERO.is_zero()
        assert Position(x=0, y=0).is_zero()
        assert not Position(x=0, y=1).is_zero()

    def test_add_and_scale(self):
        """Test offset arithmetic."""
        pos = Position(x=290, y=290) + Position(x=70, y=0) * 2
        assert pos == Position(x=430, y=290)

    def test_frozen(self):
        """Test that positions cannot be changed in place."""
        pos = Position(x=1, y=2)
        with pytest.raises(ValidationError):
            pos.x = 5


class TestRegion:
    """Tests for region classification."""

    def test_zero_origin_is_draw(self):
        assert region_for_origin(ZERO) == Region.DRAW

    def test_other_origin_is_match(self):
        assert region_for_origin(Position(x=250, y=1000)) == Region.MATCH
        assert region_for_origin(Position(x=0, y=-1)) == Region.MATCH


class TestCard:
    """Tests for Card class."""

    def test_create_card(self):
        """Test creating a card with defaults."""
        card = Card(id=3, rank=Rank.KING, suit=Suit.HEARTS, region=Region.MATCH)
        assert card.id == 3
        assert card.rank == Rank.KING
        assert card.state == CardState.HIDDEN
        assert card.order == 0
        assert card.position == ZERO

    def test_rank_from_int(self):
        """Test that level values convert to enums."""
        card = Card(id=0, rank=0, suit=3, region=Region.DRAW)
        assert card.rank is Rank.ACE
        assert card.suit is Suit.SPADES

    def test_blank_card(self):
        """Test a card without rank or suit."""
        card = Card(id=0, region=Region.MATCH)
        assert card.rank is None
        assert card.suit is None
        assert "?" in str(card)

    def test_identity_is_frozen(self):
        """Test that id, origin and region cannot be reassigned."""
        card = Card(id=1, rank=Rank.TWO, origin=Position(x=5, y=5), region=Region.MATCH)
        with pytest.raises(ValidationError):
            card.id = 2
        with pytest.raises(ValidationError):
            card.origin = ZERO
        with pytest.raises(ValidationError):
            card.region = Region.DRAW

    def test_play_state_is_mutable(self):
        """Test that position, state and order can change."""
        card = Card(id=1, rank=Rank.TWO, region=Region.MATCH)
        card.position = Position(x=10, y=20)
        card.state = CardState.REVEALED
        card.order = 101
        assert card.position == Position(x=10, y=20)
        assert card.state == CardState.REVEALED
        assert card.order == 101

    def test_snapshot(self):
        """Test that snapshots copy the observable state."""
        card = Card(
            id=7,
            rank=Rank.QUEEN,
            suit=Suit.CLUBS,
            region=Region.MATCH,
            position=Position(x=1, y=2),
            state=CardState.REVEALED,
            order=4,
        )
        snap = card.snapshot()
        card.order = 9

        assert snap.id == 7
        assert snap.rank == Rank.QUEEN
        assert snap.position == Position(x=1, y=2)
        assert snap.state == CardState.REVEALED
        assert snap.order == 4

    def test_card_string(self):
        """Test card string representation."""
        card = Card(id=2, rank=Rank.TEN, suit=Suit.DIAMONDS, region=Region.MATCH)
        assert "#2" in str(card)
        assert "10" in str(card)
