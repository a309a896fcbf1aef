"""HTTP front-end serving a single checkers match."""
from __future__ import annotations

from importlib import import_module

__all__ = ["app", "build_app", "create_app", "GameSession"]


def __getattr__(name: str):
    if name in ("app", "build_app", "create_app"):
        return getattr(import_module(".app", __name__), name)
    if name == "GameSession":
        return getattr(import_module(".session", __name__), name)
    raise AttributeError(name)
