from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .board import Board, Cell
from .config import RuleSettings
from .errors import CheckersError, GameOverError, IllegalMoveError, NoPieceSelectedError, WrongTurnError
from .moves import available_moves, is_jump, midpoint
from .pieces import Color, Piece

logger = logging.getLogger(__name__)

Coordinate = tuple[int, int]
PiecesInPlay = dict[Color, set[Piece]]


def _rejected(error: CheckersError) -> CheckersError:
    logger.debug("Rejected: %s", error)
    return error


class GameStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"


@dataclass(frozen=True)
class Outcome:
    status: GameStatus = GameStatus.IN_PROGRESS
    winner: Optional[Color] = None

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls()

    @classmethod
    def won(cls, color: Color) -> "Outcome":
        return cls(status=GameStatus.WON, winner=color)

    @property
    def is_over(self) -> bool:
        return self.status == GameStatus.WON


@dataclass
class GameState:
    board: Board
    pieces_in_play: PiecesInPlay
    current_player: Color = Color.WHITE
    outcome: Outcome = field(default_factory=Outcome.in_progress)

    @classmethod
    def from_board(cls, board: Board, current_player: Color = Color.WHITE) -> "GameState":
        pieces_in_play = {color: set(board.pieces(color)) for color in Color}
        state = cls(board=board, pieces_in_play=pieces_in_play, current_player=current_player)
        state.outcome = _check_outcome(pieces_in_play)
        return state

    @property
    def is_over(self) -> bool:
        return self.outcome.is_over


@dataclass(frozen=True)
class MoveResult:
    piece: Piece
    source: Cell
    destination: Cell
    captured_piece: Optional[Piece]
    promoted: bool
    next_player: Color
    outcome: Outcome

    @property
    def is_jump(self) -> bool:
        return is_jump(self.source, self.destination)


def initialize() -> GameState:
    return GameState.from_board(Board.initial(), Color.WHITE)


def legal_moves(state: GameState, x: int, y: int, *, rules: Optional[RuleSettings] = None) -> set[Cell]:
    """Destinations for the piece on (x, y), after checking it may move at all."""
    rules = rules or RuleSettings()
    if state.is_over:
        raise _rejected(GameOverError("The game has already ended."))
    piece = state.board.piece_at(x, y)
    if piece is None:
        raise _rejected(NoPieceSelectedError(f"No piece at ({x}, {y})."))
    if piece.color != state.current_player:
        raise _rejected(WrongTurnError(f"It is {state.current_player.value}'s turn."))
    return available_moves(piece, state.board, allow_friendly_hop=rules.allow_friendly_hop)


def apply_move(
    state: GameState,
    piece: Piece,
    destination: Cell,
    *,
    rules: Optional[RuleSettings] = None,
) -> MoveResult:
    """Move ``piece`` to ``destination``, resolving capture, promotion and turn order.

    The destination is checked against a fresh move list, so a rejected call
    leaves the state untouched.
    """
    rules = rules or RuleSettings()
    if state.is_over:
        raise _rejected(GameOverError("The game has already ended."))
    source = piece.position
    if source is None or piece not in state.pieces_in_play[piece.color]:
        raise _rejected(NoPieceSelectedError("Piece is not in play."))
    if piece.color != state.current_player:
        raise _rejected(WrongTurnError(f"It is {state.current_player.value}'s turn."))
    if destination not in available_moves(piece, state.board, allow_friendly_hop=rules.allow_friendly_hop):
        raise _rejected(IllegalMoveError(f"{piece!r} cannot move to {destination!r}."))

    captured: Optional[Piece] = None
    if is_jump(source, destination):
        middle = midpoint(state.board, source, destination)
        victim = middle.piece
        if victim is not None and victim.color != piece.color:
            state.board.remove(*middle.coords)
            state.pieces_in_play[victim.color].discard(victim)
            captured = victim
            logger.info("%s captured %r at %s", piece.color.value, victim, middle.coords)

    destination.set_piece(piece)

    promoted = False
    last_row = state.board.width - 1 if piece.color == Color.WHITE else 0
    if destination.y == last_row:
        promoted = piece.promote()
        if promoted:
            logger.info("%s piece promoted to king at %s", piece.color.value, destination.coords)

    state.current_player = piece.color.opponent
    state.outcome = _check_outcome(state.pieces_in_play)
    if state.outcome.is_over:
        logger.info("Game over, %s wins", state.outcome.winner.value)

    logger.debug("Moved %s -> %s\n%s", source.coords, destination.coords, state.board)
    return MoveResult(
        piece=piece,
        source=source,
        destination=destination,
        captured_piece=captured,
        promoted=promoted,
        next_player=state.current_player,
        outcome=state.outcome,
    )


def _check_outcome(pieces_in_play: PiecesInPlay) -> Outcome:
    for color in Color:
        if not pieces_in_play[color]:
            return Outcome.won(color.opponent)
    return Outcome.in_progress()


class Game:
    """One match: the engine state plus the caller's current selection."""

    def __init__(self, rules: Optional[RuleSettings] = None) -> None:
        self.rules = rules or RuleSettings()
        self.state = initialize()
        self.selected: Optional[Piece] = None
        self.destinations: set[Cell] = set()
        self.last_result: Optional[MoveResult] = None

    def reset(self) -> None:
        self.state = initialize()
        self.clear_selection()
        self.last_result = None

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def current_player(self) -> Color:
        return self.state.current_player

    @property
    def winner(self) -> Optional[Color]:
        return self.state.outcome.winner

    @property
    def is_over(self) -> bool:
        return self.state.is_over

    def piece_counts(self) -> dict[Color, int]:
        return {color: len(pieces) for color, pieces in self.state.pieces_in_play.items()}

    def legal_moves(self, x: int, y: int) -> set[Cell]:
        return legal_moves(self.state, x, y, rules=self.rules)

    def select(self, x: int, y: int) -> set[Cell]:
        """Select the piece on (x, y); selecting it again drops the selection."""
        moves = self.legal_moves(x, y)
        piece = self.board.piece_at(x, y)
        if piece is self.selected:
            self.clear_selection()
            return set()
        self.selected = piece
        self.destinations = moves
        return moves

    def clear_selection(self) -> None:
        self.selected = None
        self.destinations = set()

    def move(self, source: Coordinate, destination: Coordinate) -> MoveResult:
        self.legal_moves(*source)
        piece = self.board.piece_at(*source)
        target = self.board.cell(*destination)
        result = apply_move(self.state, piece, target, rules=self.rules)
        self.clear_selection()
        self.last_result = result
        return result

    def move_selected_to(self, x: int, y: int) -> MoveResult:
        if self.selected is None or self.selected.position is None:
            raise _rejected(NoPieceSelectedError("Select a piece first."))
        return self.move(self.selected.position.coords, (x, y))
