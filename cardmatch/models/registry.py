"""Card registry for one game session."""

from typing import Iterator

from .card import Card, Region


class CardRegistry:
    """All cards of a session, indexed by id.

    Cards are kept in insertion order. The registry holds no game rules;
    removed cards stay registered and are marked through their state.
    """

    def __init__(self, cards: list[Card] | None = None):
        """Initialize registry.

        Args:
            cards: Initial cards, in generation order.
        """
        self._cards: dict[int, Card] = {}
        for card in cards or []:
            self.add(card)

    def add(self, card: Card) -> None:
        """Register a card.

        Raises:
            ValueError: If a card with the same id is already registered.
        """
        if card.id in self._cards:
            raise ValueError(f"Duplicate card id: {card.id}")
        self._cards[card.id] = card

    def lookup(self, card_id: int | None) -> Card | None:
        """Get the card with the given id, or None if not registered."""
        if card_id is None:
            return None
        return self._cards.get(card_id)

    def clear(self) -> None:
        """Remove all cards."""
        self._cards.clear()

    def in_region(self, region: Region) -> list[Card]:
        """Get all cards dealt into a region, in generation order."""
        return [c for c in self._cards.values() if c.region == region]

    def is_empty(self) -> bool:
        """Check if registry is empty."""
        return not self._cards

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards.values())

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card_id: object) -> bool:
        return card_id in self._cards

    def __repr__(self) -> str:
        return f"CardRegistry({len(self._cards)} cards)"
