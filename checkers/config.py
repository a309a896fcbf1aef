"""
Runtime settings for the engine and its front-ends.

Values come from defaults, ``CHECKERS_*`` environment variables or a JSON
file; the entry points let command-line flags override them afterwards.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class RuleSettings(BaseModel):
    """Rule switches for the move generator."""

    allow_friendly_hop: bool = Field(
        default=False,
        description="Let a man hop forward over its own colour (captures nothing)",
    )


class DisplaySettings(BaseModel):
    """Desktop window and animation settings."""

    cell_size: int = Field(default=48, ge=16, le=160, description="Edge of one board cell in pixels")
    fps: int = Field(default=60, ge=1, le=240, description="Frame rate of the render loop")
    theme: int = Field(default=0, ge=0, le=2, description="Highlight colour theme index")
    animation_speed: float = Field(default=0.5, gt=0.0, le=1.0, description="Lerp factor per frame")


class ServerSettings(BaseModel):
    """HTTP front-end settings."""

    host: str = Field(default="127.0.0.1", description="Bind host for the API server")
    port: int = Field(default=8000, ge=1, le=65535, description="Bind port for the API server")
    reload: bool = Field(default=False, description="Enable autoreload (development only)")


class LoggingSettings(BaseModel):
    level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v):
        v_upper = v.upper() if isinstance(v, str) else str(v).upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"level must be one of {list(VALID_LOG_LEVELS)}")
        return v_upper


class CheckersSettings(BaseModel):
    rules: RuleSettings = Field(default_factory=RuleSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_env(cls) -> "CheckersSettings":
        """Create settings from ``CHECKERS_*`` environment variables."""
        return cls(
            rules=RuleSettings(
                allow_friendly_hop=os.getenv("CHECKERS_FRIENDLY_HOP", "false").lower() == "true",
            ),
            display=DisplaySettings(
                cell_size=int(os.getenv("CHECKERS_CELL_SIZE", "48")),
                fps=int(os.getenv("CHECKERS_FPS", "60")),
                theme=int(os.getenv("CHECKERS_THEME", "0")),
            ),
            server=ServerSettings(
                host=os.getenv("CHECKERS_HOST", "127.0.0.1"),
                port=int(os.getenv("CHECKERS_PORT", "8000")),
            ),
            logging=LoggingSettings(level=os.getenv("CHECKERS_LOG_LEVEL", "INFO")),
        )


def load_settings(path: Optional[Union[str, Path]] = None) -> CheckersSettings:
    """Read settings from a JSON file, or from the environment when no file is given."""
    if path is None:
        return CheckersSettings.from_env()
    return CheckersSettings.model_validate_json(Path(path).read_text(encoding="utf-8"))


def configure_logging(settings: LoggingSettings) -> None:
    logging.basicConfig(level=getattr(logging, settings.level), format=LOG_FORMAT)
