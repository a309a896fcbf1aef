from __future__ import annotations


class CheckersError(Exception):
    """Base class for actions the engine refuses. State is never mutated."""


class OutOfBoundsError(CheckersError, ValueError):
    def __init__(self, x: int, y: int) -> None:
        super().__init__(f"Cell ({x}, {y}) is outside the board.")
        self.x = x
        self.y = y


class NoPieceSelectedError(CheckersError, ValueError):
    pass


class WrongTurnError(CheckersError, ValueError):
    pass


class IllegalMoveError(CheckersError, ValueError):
    pass


class GameOverError(CheckersError, RuntimeError):
    pass
