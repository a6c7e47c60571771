from __future__ import annotations


class GameOverError(RuntimeError):
    """Raised when a finished game is asked to advance."""
