"""Game logger for step-by-step session replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, TextIO

from pydantic import BaseModel

from cardmatch.models.card import Card, CardSnapshot

from .formatters import format_card_state


class GameLogConfig(BaseModel):
    """Configuration for game logging."""

    enabled: bool = False
    output_path: str = "game_log.jsonl"


class GameLogger:
    """Logger for game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    Every committed action is written with the card state after it, so a
    session can be replayed without the engine.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_session_start(
        self,
        level: str,
        cards: Iterable[Card],
        active_id: int | None,
    ) -> None:
        """Log session start with the dealt board.

        Args:
            level: Level name or path.
            cards: All cards after layout.
            active_id: Initial active card id.
        """
        self._write({
            "type": "session_start",
            "timestamp": datetime.now().isoformat(),
            "level": level,
            "cards": [format_card_state(c) for c in cards],
            "active": active_id,
        })

    def log_action(
        self,
        action: str,
        card: Card,
        prev_active_id: int | None,
        undo_depth: int,
    ) -> None:
        """Log an accepted move or draw.

        Args:
            action: "move" or "draw".
            card: Card after the action (it is the new active card).
            prev_active_id: Active card id before the action.
            undo_depth: Undo stack size after the action.
        """
        self._write({
            "type": action,
            "card": format_card_state(card),
            "prev_active": prev_active_id,
            "undo_depth": undo_depth,
        })

    def log_undo(
        self,
        card: CardSnapshot,
        active_id: int | None,
        undo_depth: int,
    ) -> None:
        """Log an applied undo.

        Args:
            card: Restored card.
            active_id: Active card id after the undo.
            undo_depth: Undo stack size after the undo.
        """
        self._write({
            "type": "undo",
            "card": format_card_state(card),
            "active": active_id,
            "undo_depth": undo_depth,
        })

    def log_special(self, event: str, detail: dict[str, Any] | None = None) -> None:
        """Log a special event.

        Args:
            event: Event type (e.g., "data_corruption").
            detail: Additional event details.
        """
        record: dict[str, Any] = {
            "type": "special",
            "event": event,
        }
        if detail:
            record["detail"] = detail
        self._write(record)

    def log_session_end(self, moves: int, undos: int) -> None:
        """Log session end.

        Args:
            moves: Accepted moves and draws over the session.
            undos: Applied undos over the session.
        """
        self._write({
            "type": "session_end",
            "timestamp": datetime.now().isoformat(),
            "moves": moves,
            "undos": undos,
        })
