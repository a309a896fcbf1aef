from __future__ import annotations

from .board import Board, Cell
from .pieces import Piece


HORIZONTAL_STEPS = (-1, 1)


def available_moves(piece: Piece, board: Board, *, allow_friendly_hop: bool = False) -> set[Cell]:
    """Destinations reachable by ``piece`` in one step or one jump.

    Men move along their forward diagonals only, kings also backwards.
    A jump lands two cells away over an opposing piece. With
    ``allow_friendly_hop`` a man may also hop forward over its own colour,
    which captures nothing.
    """
    origin = piece.position
    if origin is None:
        return set()

    destinations: set[Cell] = set()
    _scan_direction(piece, board, origin, piece.forward, allow_friendly_hop, destinations)
    if piece.is_king:
        _scan_direction(piece, board, origin, -piece.forward, False, destinations)
    return destinations


def _scan_direction(
    piece: Piece,
    board: Board,
    origin: Cell,
    dy: int,
    allow_friendly_hop: bool,
    destinations: set[Cell],
) -> None:
    for dx in HORIZONTAL_STEPS:
        step_x, step_y = origin.x + dx, origin.y + dy
        if not board.in_bounds(step_x, step_y):
            continue
        neighbour = board.cell(step_x, step_y)
        if neighbour.piece is None:
            destinations.add(neighbour)
            continue

        if neighbour.piece.color == piece.color and not allow_friendly_hop:
            continue
        land_x, land_y = step_x + dx, step_y + dy
        if board.in_bounds(land_x, land_y) and board.cell(land_x, land_y).piece is None:
            destinations.add(board.cell(land_x, land_y))


def is_jump(source: Cell, destination: Cell) -> bool:
    return abs(destination.x - source.x) == 2 or abs(destination.y - source.y) == 2


def midpoint(board: Board, source: Cell, destination: Cell) -> Cell:
    return board.cell((source.x + destination.x) // 2, (source.y + destination.y) // 2)
