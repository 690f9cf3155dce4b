"""Level description loading.

Level files are JSON documents with a "Playfield" array (match area) and a
"Stack" array (draw pile)::

    {
        "Playfield": [
            {"CardFace": 12, "CardSuit": 0, "Position": {"x": 250, "y": 1000}}
        ],
        "Stack": [
            {"CardFace": 2, "CardSuit": 0, "Position": {"x": 0, "y": 0}}
        ]
    }

CardFace is the 0-based rank (0=A, 12=K), CardSuit is 0-3
(clubs, diamonds, hearts, spades). Any key may be left out.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from cardmatch.models.card import ZERO, Position, Rank, Suit

logger = logging.getLogger(__name__)

LEVEL_PREFIX = "level_"
LEVEL_SUFFIX = ".json"


class CardConfigData(BaseModel):
    """Static description of one dealt card."""

    model_config = ConfigDict(populate_by_name=True)

    face: Rank | None = Field(default=None, alias="CardFace")
    suit: Suit | None = Field(default=None, alias="CardSuit")
    position: Position = Field(default=ZERO, alias="Position")

    @field_validator("face", "suit", mode="before")
    @classmethod
    def _negative_is_none(cls, value: Any) -> Any:
        # Level files use -1 for "no rank" / "no suit"
        if isinstance(value, int) and value < 0:
            return None
        return value


class LevelConfig(BaseModel):
    """Static description of a level."""

    model_config = ConfigDict(populate_by_name=True)

    playfield_cards: list[CardConfigData] = Field(default_factory=list, alias="Playfield")
    stack_cards: list[CardConfigData] = Field(default_factory=list, alias="Stack")

    def is_empty(self) -> bool:
        """Check if the level has no cards at all."""
        return not self.playfield_cards and not self.stack_cards


def level_path(levels_dir: Path | str, level_id: int) -> Path:
    """Build the path of a numbered level (levels/level_<id>.json)."""
    return Path(levels_dir) / f"{LEVEL_PREFIX}{level_id}{LEVEL_SUFFIX}"


def parse_level(data: dict[str, Any]) -> LevelConfig:
    """Build a LevelConfig from decoded JSON.

    Raises:
        pydantic.ValidationError: If an entry has values of the wrong type.
    """
    return LevelConfig.model_validate(data)


def load_level(path: Path | str) -> LevelConfig:
    """Load a level description from a JSON file.

    A missing or unreadable file yields an empty LevelConfig, which the
    engine refuses to start a session with.

    Args:
        path: Path to the level file.

    Returns:
        LevelConfig object.
    """
    level_file = Path(path)
    if not level_file.exists():
        logger.error(f"Level file not found: {level_file}")
        return LevelConfig()

    try:
        with open(level_file, encoding="utf-8") as f:
            data = json.load(f)
        config = parse_level(data or {})
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read level {level_file}: {e}")
        return LevelConfig()
    except (json.JSONDecodeError, ValidationError) as e:
        logger.error(f"Failed to parse level {level_file}: {e}")
        return LevelConfig()

    logger.info(
        f"Loaded {level_file}, Playfield: {len(config.playfield_cards)}, "
        f"Stack: {len(config.stack_cards)}"
    )
    return config
