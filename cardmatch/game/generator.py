"""Build the runtime card registry from a level description."""

import logging

from cardmatch.errors import InvalidConfigurationError
from cardmatch.levels import CardConfigData, LevelConfig
from cardmatch.models.card import Card, CardState, Region, region_for_origin
from cardmatch.models.registry import CardRegistry

logger = logging.getLogger(__name__)


def _make_card(card_id: int, data: CardConfigData, region: Region, state: CardState) -> Card:
    if region_for_origin(data.position) != region:
        logger.warning(
            f"Card {card_id} dealt into {region.value} at {data.position}; "
            f"keeping {region.value}"
        )
    return Card(
        id=card_id,
        rank=data.face,
        suit=data.suit,
        origin=data.position,
        region=region,
        position=data.position,
        state=state,
    )


def generate_registry(level: LevelConfig, registry: CardRegistry | None = None) -> CardRegistry:
    """Create one card per level entry.

    Match area cards come first, then draw pile cards; ids count up from 0
    in that order. Match area cards start revealed. Draw pile cards start
    hidden except the last one, which is the initial active card.

    Args:
        level: Level description.
        registry: Registry to fill (cleared first). A new one if None.

    Returns:
        The filled registry.

    Raises:
        InvalidConfigurationError: If the level has no cards.
    """
    if level.is_empty():
        raise InvalidConfigurationError("Level has no playfield or stack cards")

    registry = registry if registry is not None else CardRegistry()
    registry.clear()

    next_id = 0
    for data in level.playfield_cards:
        registry.add(_make_card(next_id, data, Region.MATCH, CardState.REVEALED))
        next_id += 1

    last_index = len(level.stack_cards) - 1
    for i, data in enumerate(level.stack_cards):
        state = CardState.REVEALED if i == last_index else CardState.HIDDEN
        registry.add(_make_card(next_id, data, Region.DRAW, state))
        next_id += 1

    logger.debug(
        f"Generated {len(registry)} cards "
        f"({len(level.playfield_cards)} playfield, {len(level.stack_cards)} stack)"
    )
    return registry
