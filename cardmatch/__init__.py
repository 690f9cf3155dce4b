"""Single-player card matching game core."""

__version__ = "0.1.0"
