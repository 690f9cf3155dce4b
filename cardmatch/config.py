"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel

from cardmatch.logging.game_logger import GameLogConfig
from cardmatch.models.card import Position


class LayoutConfig(BaseModel):
    """Board layout configuration."""

    # Draw pile
    stock_position: Position = Position(x=290, y=290)
    stock_spacing: Position = Position(x=70, y=0)  # Offset per covered card
    active_position: Position = Position(x=690, y=290)  # Active card slot

    # Match area cards are shifted so they clear the draw pile row
    playfield_offset: Position = Position(x=0, y=250)

    # Stacking order of the first active card
    base_order: int = 100


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    show_board: bool = False


class Config(BaseModel):
    """Root configuration."""

    levels_dir: str = "levels"
    layout: LayoutConfig = LayoutConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogConfig = GameLogConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
