"""
Engine Core - Board state and the Kalah rule engine.

The engine core:
1. Holds every stone count in observable cells
2. Sows, captures, and grants extra turns
3. Enforces the select -> commit / undo-once protocol
4. Detects the end of the game
"""

from .errors import (
    ErrorCode,
    MancalaError,
    ConfigurationError,
    OutOfRangeError,
    IllegalStateError,
    GameOverError,
    InvalidArgumentError,
)
from .cell import ObservableCell, Subscriber
from .board import Board, Row, Pit, Store
from .state import (
    MAX_PLAYERS,
    MAX_PITS,
    PLAYER_A,
    PLAYER_B,
    MIN_INITIAL_STONES,
    MAX_INITIAL_STONES,
    GamePhase,
    TurnState,
)
from .game import GameEngine
from .action import Action, ActionType, ActionResult, apply_action

__all__ = [
    "ErrorCode",
    "MancalaError",
    "ConfigurationError",
    "OutOfRangeError",
    "IllegalStateError",
    "GameOverError",
    "InvalidArgumentError",
    "ObservableCell",
    "Subscriber",
    "Board",
    "Row",
    "Pit",
    "Store",
    "MAX_PLAYERS",
    "MAX_PITS",
    "PLAYER_A",
    "PLAYER_B",
    "MIN_INITIAL_STONES",
    "MAX_INITIAL_STONES",
    "GamePhase",
    "TurnState",
    "GameEngine",
    "Action",
    "ActionType",
    "ActionResult",
    "apply_action",
]
