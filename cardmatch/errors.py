"""Exceptions raised by the game core."""


class CardMatchError(Exception):
    """Base class for game core errors."""


class InvalidConfigurationError(CardMatchError):
    """Level has no cards at all, so no session can start."""


class IllegalTransitionError(CardMatchError):
    """Forward state change outside the allowed transition table."""


class EmptyUndoStackError(CardMatchError, LookupError):
    """Raised when popping from an empty undo stack."""
