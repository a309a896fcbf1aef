from __future__ import annotations

from pydantic import BaseModel, Field

from checkers.board import BOARD_WIDTH


class CoordinateModel(BaseModel):
    x: int = Field(..., ge=0, lt=BOARD_WIDTH)
    y: int = Field(..., ge=0, lt=BOARD_WIDTH)


class MoveRequest(BaseModel):
    source: CoordinateModel
    destination: CoordinateModel
