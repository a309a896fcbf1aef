from __future__ import annotations

import os
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from checkers.board import BOARD_WIDTH
from checkers.config import LoggingSettings, RuleSettings, configure_logging, load_settings
from checkers.errors import GameOverError

from .schemas import MoveRequest
from .session import GameSession


def create_app(rules: Optional[RuleSettings] = None) -> FastAPI:
    app = FastAPI(title="Checkers Backend", version="1.0.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=True,
    )

    session = GameSession(rules)
    app.state.session = session

    def get_session() -> GameSession:
        return session

    @app.get("/health")
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/board")
    def read_board(session: GameSession = Depends(get_session)):
        return session.serialize()

    @app.get("/moves")
    def read_valid_moves(
        x: int = Query(..., ge=0, lt=BOARD_WIDTH),
        y: int = Query(..., ge=0, lt=BOARD_WIDTH),
        session: GameSession = Depends(get_session),
    ):
        try:
            return session.get_valid_moves(x, y)
        except GameOverError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @app.post("/move")
    def play_move(payload: MoveRequest, session: GameSession = Depends(get_session)):
        try:
            return session.make_move(payload)
        except GameOverError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @app.post("/reset")
    def reset_game(session: GameSession = Depends(get_session)):
        return session.reset()

    return app


app = create_app()


def build_app() -> FastAPI:
    """Factory for uvicorn: rules come from ``CHECKERS_CONFIG`` or the environment."""
    settings = load_settings(os.getenv("CHECKERS_CONFIG"))
    level = os.getenv("CHECKERS_LOG_LEVEL")
    logging_settings = LoggingSettings(level=level) if level else settings.logging
    configure_logging(logging_settings)
    return create_app(settings.rules)
