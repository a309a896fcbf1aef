from __future__ import annotations

from enum import Enum
from itertools import count
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .board import Cell


_PIECE_ID_COUNTER = count()


class Color(Enum):
    WHITE = "white"
    BLACK = "black"

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self is Color.WHITE else Color.WHITE


class Piece:
    def __init__(self, color: Color, *, is_king: bool = False) -> None:
        self.color = color
        self.is_king = is_king
        self.position: Optional["Cell"] = None
        self.id = next(_PIECE_ID_COUNTER)

    @property
    def forward(self) -> int:
        # White starts on rows 0-2 and heads for row 7.
        return 1 if self.color == Color.WHITE else -1

    def promote(self) -> bool:
        if self.is_king:
            return False
        self.is_king = True
        return True

    def __repr__(self) -> str:
        piece_type = "K" if self.is_king else "M"
        where = f"{self.position.x},{self.position.y}" if self.position is not None else "-"
        return f"{piece_type}({self.color.name},{where})"
