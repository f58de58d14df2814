"""
Game State - Board constants, turn phases, and per-turn flags.

The turn phase is a single enum rather than independent booleans, so
combinations such as "game over while a commit is pending" cannot be
represented.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

MAX_PLAYERS = 2
MAX_PITS = 6
PLAYER_A = 0
PLAYER_B = 1
MIN_INITIAL_STONES = 3
MAX_INITIAL_STONES = 4

PLAYER_NAMES = {PLAYER_A: "A", PLAYER_B: "B"}


def opponent(player: int) -> int:
    """Return the other player."""
    return player ^ 1


def opposite_position(position: int) -> int:
    """Index of the pit directly across the board."""
    return MAX_PITS - 1 - position


class GamePhase(Enum):
    """High-level turn phases."""
    IDLE = "idle"
    PENDING_COMMIT = "pending_commit"
    GAME_OVER = "game_over"


@dataclass
class TurnState:
    """
    Mutable turn bookkeeping owned by the engine.

    winning_player is only set together with GamePhase.GAME_OVER.
    """
    current_player: int = PLAYER_A
    phase: GamePhase = GamePhase.IDLE
    has_extra_turn: bool = False
    has_undo_available: bool = True
    winning_player: int | None = None

    @property
    def has_pending_commit(self) -> bool:
        return self.phase == GamePhase.PENDING_COMMIT

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    def end_game(self, winner: int) -> None:
        self.winning_player = winner
        self.phase = GamePhase.GAME_OVER
