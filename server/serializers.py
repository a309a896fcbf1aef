from __future__ import annotations

from typing import Any, Iterable, Optional

from checkers.board import Cell
from checkers.game import Game, MoveResult, Outcome
from checkers.pieces import Color, Piece


def _cell_to_dict(cell: Cell) -> dict[str, int]:
    return {"x": cell.x, "y": cell.y}


def serialize_piece(piece: Piece) -> dict[str, Any]:
    position = piece.position
    return {
        "id": piece.id,
        "x": position.x if position is not None else None,
        "y": position.y if position is not None else None,
        "color": piece.color.value,
        "isKing": piece.is_king,
    }


def serialize_cells(cells: Iterable[Cell]) -> list[dict[str, int]]:
    return [_cell_to_dict(cell) for cell in sorted(cells, key=lambda c: (c.y, c.x))]


def serialize_outcome(outcome: Outcome) -> dict[str, Optional[str]]:
    return {
        "status": outcome.status.value,
        "winner": outcome.winner.value if outcome.winner else None,
    }


def serialize_result(result: MoveResult) -> dict[str, Any]:
    captured = result.captured_piece
    return {
        "source": _cell_to_dict(result.source),
        "destination": _cell_to_dict(result.destination),
        "isJump": result.is_jump,
        "capturedPiece": serialize_piece(captured) if captured is not None else None,
        "promoted": result.promoted,
        "nextPlayer": result.next_player.value,
        "outcome": serialize_outcome(result.outcome),
    }


def serialize_game(game: Game) -> dict[str, Any]:
    pieces = [serialize_piece(piece) for piece in game.board.pieces()]
    counts = game.piece_counts()
    kings = {color: sum(1 for p in game.state.pieces_in_play[color] if p.is_king) for color in Color}

    return {
        "boardSize": game.board.width,
        "turn": game.current_player.value,
        "winner": game.winner.value if game.winner else None,
        "outcome": serialize_outcome(game.state.outcome),
        "pieces": pieces,
        "rows": list(game.board.to_rows()),
        "pieceCounts": {
            color.value: {"total": counts[color], "kings": kings[color]}
            for color in (Color.WHITE, Color.BLACK)
        },
        "friendlyHop": game.rules.allow_friendly_hop,
    }
