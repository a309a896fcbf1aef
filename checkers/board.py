from __future__ import annotations

import logging
from typing import Iterator, Optional

from .errors import OutOfBoundsError
from .pieces import Color, Piece


logger = logging.getLogger(__name__)

BOARD_WIDTH = 8
START_ROWS = 3


class Cell:
    __slots__ = ("_x", "_y", "_piece")

    def __init__(self, x: int, y: int) -> None:
        self._x = x
        self._y = y
        self._piece: Optional[Piece] = None

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def coords(self) -> tuple[int, int]:
        return (self._x, self._y)

    @property
    def is_dark(self) -> bool:
        return (self._x + self._y) % 2 == 1

    @property
    def piece(self) -> Optional[Piece]:
        return self._piece

    def set_piece(self, piece: Optional[Piece]) -> None:
        """Occupy this cell with ``piece`` (or empty it), keeping both links in sync."""
        previous = self._piece
        if previous is piece:
            if piece is not None:
                piece.position = self
            return
        if previous is not None:
            previous.position = None
        if piece is not None and piece.position is not None and piece.position is not self:
            piece.position._piece = None
        self._piece = piece
        if piece is not None:
            piece.position = self

    def __repr__(self) -> str:
        return f"Cell({self._x}, {self._y})"


class Board:
    def __init__(self) -> None:
        self.grid: list[list[Cell]] = [
            [Cell(x, y) for x in range(BOARD_WIDTH)] for y in range(BOARD_WIDTH)
        ]
        self.width = BOARD_WIDTH

    @classmethod
    def initial(cls) -> "Board":
        board = cls()
        board._set_start_pieces()
        return board

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.width

    def cell(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            logger.debug("Rejected: cell (%s, %s) is off the board", x, y)
            raise OutOfBoundsError(x, y)
        return self.grid[y][x]

    def piece_at(self, x: int, y: int) -> Optional[Piece]:
        return self.cell(x, y).piece

    def place(self, piece: Piece, x: int, y: int) -> Piece:
        self.cell(x, y).set_piece(piece)
        return piece

    def remove(self, x: int, y: int) -> Optional[Piece]:
        cell = self.cell(x, y)
        piece = cell.piece
        cell.set_piece(None)
        return piece

    def cells(self) -> Iterator[Cell]:
        for row in self.grid:
            yield from row

    def pieces(self, color: Optional[Color] = None) -> list[Piece]:
        return [
            cell.piece
            for cell in self.cells()
            if cell.piece is not None and (color is None or cell.piece.color == color)
        ]

    def to_rows(self) -> tuple[str, ...]:
        rows = []
        for row in self.grid:
            line = ""
            for cell in row:
                p = cell.piece
                if p is None:
                    line += "."
                elif p.color == Color.WHITE:
                    line += "W" if p.is_king else "w"
                else:
                    line += "B" if p.is_king else "b"
            rows.append(line)
        return tuple(rows)

    def __str__(self) -> str:
        return "\n".join(" ".join(line) for line in self.to_rows())

    def _set_start_pieces(self) -> None:
        for cell in self.cells():
            if not cell.is_dark:
                continue
            if cell.y < START_ROWS:
                cell.set_piece(Piece(Color.WHITE))
            elif cell.y >= self.width - START_ROWS:
                cell.set_piece(Piece(Color.BLACK))
