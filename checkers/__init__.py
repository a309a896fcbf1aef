"""Checkers game-state and move-legality engine."""

from .board import BOARD_WIDTH, Board, Cell
from .config import CheckersSettings, RuleSettings
from .errors import (
    CheckersError,
    GameOverError,
    IllegalMoveError,
    NoPieceSelectedError,
    OutOfBoundsError,
    WrongTurnError,
)
from .game import Game, GameState, GameStatus, MoveResult, Outcome, apply_move, initialize, legal_moves
from .moves import available_moves
from .pieces import Color, Piece

__all__ = [
	"BOARD_WIDTH",
	"Board",
	"Cell",
	"CheckersSettings",
	"RuleSettings",
	"CheckersError",
	"GameOverError",
	"IllegalMoveError",
	"NoPieceSelectedError",
	"OutOfBoundsError",
	"WrongTurnError",
	"Game",
	"GameState",
	"GameStatus",
	"MoveResult",
	"Outcome",
	"apply_move",
	"initialize",
	"legal_moves",
	"available_moves",
	"Color",
	"Piece",
]
