from __future__ import annotations

import logging
from threading import Lock
from typing import Any, Optional

from checkers.config import RuleSettings
from checkers.game import Game

from .schemas import MoveRequest
from .serializers import serialize_cells, serialize_game, serialize_result

logger = logging.getLogger(__name__)


class GameSession:
    """Thread-safe orchestrator around a single Game instance."""

    def __init__(self, rules: Optional[RuleSettings] = None) -> None:
        self.lock = Lock()
        self.game = Game(rules)

    # public API ---------------------------------------------------------

    def serialize(self) -> dict[str, Any]:
        with self.lock:
            return serialize_game(self.game)

    def reset(self) -> dict[str, Any]:
        with self.lock:
            self.game.reset()
            logger.info("Game reset")
            return serialize_game(self.game)

    def get_valid_moves(self, x: int, y: int) -> dict[str, Any]:
        with self.lock:
            moves = self.game.legal_moves(x, y)
            return {
                "piece": {"x": x, "y": y},
                "moves": serialize_cells(moves),
            }

    def make_move(self, payload: MoveRequest) -> dict[str, Any]:
        with self.lock:
            source = (payload.source.x, payload.source.y)
            destination = (payload.destination.x, payload.destination.y)
            result = self.game.move(source, destination)
            state = serialize_game(self.game)
            state["result"] = serialize_result(result)
            return state
