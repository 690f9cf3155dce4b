"""Match rule between the active card and a candidate."""

from cardmatch.models.card import Card, Rank

# The two rank extremes match each other (K-A wrap)
WRAP_PAIR = frozenset({Rank.ACE, Rank.KING})


def ranks_match(a: Rank | None, b: Rank | None) -> bool:
    """Check rank adjacency.

    Args:
        a: First rank.
        b: Second rank.

    Returns:
        True if the ranks differ by exactly one, or are Ace and King.
    """
    if a is None or b is None:
        return False
    if abs(a - b) == 1:
        return True
    return {a, b} == WRAP_PAIR


def can_match(a: Card | None, b: Card | None) -> bool:
    """Check if two cards may be matched.

    Symmetric. Missing cards and a card paired with itself never match.

    Args:
        a: Usually the active card.
        b: Usually the candidate from the match area.

    Returns:
        True if the move is legal.
    """
    if a is None or b is None:
        return False
    if a is b or a.id == b.id:
        return False
    return ranks_match(a.rank, b.rank)
