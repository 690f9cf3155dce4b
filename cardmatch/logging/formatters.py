"""Formatters for game log output."""

from cardmatch.models.card import Card, CardSnapshot, Position, Rank, Suit

# Suit codes for log output
SUIT_CODES: dict[Suit, str] = {
    Suit.CLUBS: "C",
    Suit.DIAMONDS: "D",
    Suit.HEARTS: "H",
    Suit.SPADES: "S",
}

# Rank codes for log output (same letters as RANK_NAMES)
RANK_CODES: dict[Rank, str] = {
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


def format_card(card: Card | CardSnapshot) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Formatted string (e.g., "SK" for Spade King, "-" for a missing
        suit or rank).
    """
    suit = SUIT_CODES[card.suit] if card.suit is not None else "-"
    rank = RANK_CODES[card.rank] if card.rank is not None else "-"
    return f"{suit}{rank}"


def format_position(position: Position) -> list[float]:
    """Format a position as a JSON-friendly [x, y] pair."""
    return [position.x, position.y]


def format_card_state(card: Card | CardSnapshot) -> dict[str, object]:
    """Format the observable state of a card.

    Args:
        card: Card to format.

    Returns:
        Dict with id, face, position, state and order.
    """
    return {
        "id": card.id,
        "card": format_card(card),
        "position": format_position(card.position),
        "state": card.state.value,
        "order": card.order,
    }
