"""
Engine Errors - The failure taxonomy of the rule engine.

Every error is raised before any cell is touched, so a failed
command never leaves partial state behind.

Error Codes:
- CONFIGURATION_ERROR: Engine built with an unsupported stone count
- OUT_OF_RANGE: Pit position outside the row
- ILLEGAL_STATE: Command not allowed in the current turn phase
- GAME_OVER: Mutating command after a winner was decided
- INVALID_ARGUMENT: Negative stone amount added to a cell
"""

from __future__ import annotations
from enum import Enum


class ErrorCode(str, Enum):
    """Structured error codes."""
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    ILLEGAL_STATE = "ILLEGAL_STATE"
    GAME_OVER = "GAME_OVER"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"


class MancalaError(Exception):
    """Base class for all engine errors."""
    code: ErrorCode = ErrorCode.ILLEGAL_STATE


class ConfigurationError(MancalaError, ValueError):
    """Raised when an engine is built with an out-of-range stone count."""
    code = ErrorCode.CONFIGURATION_ERROR


class OutOfRangeError(MancalaError, IndexError):
    """Raised when a pit position is outside [0, MAX_PITS)."""
    code = ErrorCode.OUT_OF_RANGE


class IllegalStateError(MancalaError, RuntimeError):
    """Raised when a command does not fit the current turn phase."""
    code = ErrorCode.ILLEGAL_STATE


class GameOverError(MancalaError, RuntimeError):
    """Raised on any mutating command once a winner exists."""
    code = ErrorCode.GAME_OVER

    def __init__(self, message: str = "The game is already over"):
        super().__init__(message)


class InvalidArgumentError(MancalaError, ValueError):
    """Raised when a negative amount of stones is added to a cell."""
    code = ErrorCode.INVALID_ARGUMENT
