"""
Configuration - Game settings from the environment.

Environment variables:
    KALAH_INITIAL_STONES   Stones per pit for new games (default: 3)
    KALAH_LOG_LEVEL        Log level, read by logging_utils (default: LOG_LEVEL or INFO)
"""

from __future__ import annotations
import os

from pydantic import BaseModel, Field, ValidationError, field_validator

from .engine_core.errors import ConfigurationError
from .engine_core.game import GameEngine
from .engine_core.state import MAX_INITIAL_STONES, MIN_INITIAL_STONES


class GameConfig(BaseModel):
    """Settings for a new game."""
    initial_stones: int = Field(
        default=MIN_INITIAL_STONES,
        description="Stones placed in each pit at the start",
    )

    @field_validator("initial_stones")
    @classmethod
    def _stones_in_range(cls, value: int) -> int:
        if not MIN_INITIAL_STONES <= value <= MAX_INITIAL_STONES:
            raise ValueError(
                f"must be between {MIN_INITIAL_STONES} and {MAX_INITIAL_STONES}"
            )
        return value

    @classmethod
    def create(cls, **values) -> GameConfig:
        """
        Build a config, reporting bad values as ConfigurationError.
        """
        try:
            return cls(**values)
        except ValidationError as e:
            messages = "; ".join(
                f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )
            raise ConfigurationError(f"Invalid game configuration: {messages}") from e

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> GameConfig:
        """Read settings from the environment (or a given mapping)."""
        if environ is None:
            environ = os.environ
        raw = environ.get("KALAH_INITIAL_STONES", str(MIN_INITIAL_STONES))
        return cls.create(initial_stones=raw)

    def build_engine(self) -> GameEngine:
        return GameEngine(self.initial_stones)
