"""Card model and positional types."""

from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field


class Suit(IntEnum):
    """Card suit (matches the CardSuit values in level files)."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3


class Rank(IntEnum):
    """Card rank, 0-based.

    Value matches the CardFace values in level files.
    Ace and King are the two extremes and wrap around when matching.
    """

    ACE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7
    NINE = 8
    TEN = 9
    JACK = 10
    QUEEN = 11
    KING = 12


class CardState(str, Enum):
    """Visibility state of a card."""

    HIDDEN = "hidden"  # Face down in the draw pile
    REVEALED = "revealed"  # Face up
    REMOVED = "removed"  # Played out of the game


class Region(str, Enum):
    """Board region a card was dealt into."""

    DRAW = "draw"  # Draw/waste pile
    MATCH = "match"  # Match area


# Map rank to display string
RANK_NAMES = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}

SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}


class Position(BaseModel, frozen=True):
    """2D board coordinate."""

    x: float = 0.0
    y: float = 0.0

    def is_zero(self) -> bool:
        """Check if this is the zero vector."""
        return self.x == 0.0 and self.y == 0.0

    def __add__(self, other: "Position") -> "Position":
        return Position(x=self.x + other.x, y=self.y + other.y)

    def __mul__(self, factor: float) -> "Position":
        return Position(x=self.x * factor, y=self.y * factor)

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"


ZERO = Position()


def region_for_origin(origin: Position) -> Region:
    """Classify a card by its dealt position.

    Level files place draw pile cards at the zero vector; everything
    else belongs to the match area.

    Args:
        origin: Position the card was dealt at.

    Returns:
        Region the card belongs to.
    """
    return Region.DRAW if origin.is_zero() else Region.MATCH


def card_label(rank: Rank | None, suit: Suit | None) -> str:
    """Get display string for a rank/suit pair ("?" for missing parts)."""
    suit_str = SUIT_SYMBOLS[suit] if suit is not None else "?"
    rank_str = RANK_NAMES[rank] if rank is not None else "?"
    return f"{suit_str}{rank_str}"


class CardSnapshot(BaseModel, frozen=True):
    """Read-only view of a card handed to rendering and input code."""

    id: int
    rank: Rank | None = None
    suit: Suit | None = None
    position: Position = ZERO
    state: CardState = CardState.HIDDEN
    order: int = 0

    def __str__(self) -> str:
        return f"#{self.id} {card_label(self.rank, self.suit)}"


class Card(BaseModel):
    """Single card of a session.

    Identity, face and dealt origin are fixed at creation. Position,
    visibility and stacking order change as the game is played.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(frozen=True)
    rank: Rank | None = Field(default=None, frozen=True)  # None for blank cards
    suit: Suit | None = Field(default=None, frozen=True)
    origin: Position = Field(default=ZERO, frozen=True)
    region: Region = Field(frozen=True)

    # Mutable play state
    position: Position = ZERO
    state: CardState = CardState.HIDDEN
    order: int = 0  # Paint order, higher is on top

    def snapshot(self) -> CardSnapshot:
        """Get an immutable copy of the observable card state."""
        return CardSnapshot(
            id=self.id,
            rank=self.rank,
            suit=self.suit,
            position=self.position,
            state=self.state,
            order=self.order,
        )

    def __str__(self) -> str:
        return f"#{self.id} {card_label(self.rank, self.suit)}"

    def __repr__(self) -> str:
        return (
            f"Card(id={self.id}, face={card_label(self.rank, self.suit)!r}, "
            f"region={self.region.value}, state={self.state.value}, order={self.order})"
        )
