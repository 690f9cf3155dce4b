"""Shared fixtures for game tests."""

import pytest

from cardmatch.config import Config
from cardmatch.game.engine import GameEngine
from cardmatch.levels import CardConfigData, LevelConfig
from cardmatch.models.card import Position, Rank, Suit


def entry(rank: Rank | None, x: float = 0, y: float = 0, suit: Suit | None = Suit.SPADES) -> CardConfigData:
    """Build one level entry."""
    return CardConfigData(face=rank, suit=suit, position=Position(x=x, y=y))


def make_level(playfield: list[Rank] | None = None, stack: list[Rank] | None = None) -> LevelConfig:
    """Build a level with match area cards in a row and stack cards at zero."""
    return LevelConfig(
        playfield_cards=[entry(r, x=100 + 100 * i, y=600) for i, r in enumerate(playfield or [])],
        stack_cards=[entry(r) for r in (stack or [])],
    )


@pytest.fixture
def config():
    return Config()


@pytest.fixture
def engine(config):
    return GameEngine(config)
