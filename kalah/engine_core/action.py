"""
Action System - Commands, results, and their dispatch onto an engine.

Actions represent the three player commands of a turn:
1. Select a pit (sow it)
2. Commit the pending selection
3. Undo the pending selection

apply_action() is the single seam where engine errors become
structured failure results for a presentation layer.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from .errors import ErrorCode, MancalaError
from .state import PLAYER_NAMES

if TYPE_CHECKING:
    from .game import GameEngine


class ActionType(Enum):
    """Types of actions in the system."""
    SELECT = "select"
    COMMIT = "commit"
    UNDO = "undo"


@dataclass
class Action:
    """
    A command to be applied to an engine.

    position is only meaningful for SELECT.
    """
    action_type: ActionType
    position: int | None = None

    @classmethod
    def select(cls, position: int) -> Action:
        """Factory for select action."""
        return cls(action_type=ActionType.SELECT, position=position)

    @classmethod
    def commit(cls) -> Action:
        """Factory for commit action."""
        return cls(action_type=ActionType.COMMIT)

    @classmethod
    def undo(cls) -> Action:
        """Factory for undo action."""
        return cls(action_type=ActionType.UNDO)

    def describe(self) -> str:
        if self.action_type == ActionType.SELECT:
            return f"select pit {self.position}"
        return self.action_type.value


@dataclass
class ActionResult:
    """
    Result of applying an action.

    Contains:
    - Whether action succeeded
    - Errors (if failed)
    - Human-readable changes (for UI updates)
    """
    success: bool
    error: str | None = None
    error_code: str | None = None
    changes: list[str] = field(default_factory=list)

    @classmethod
    def failure(cls, error: str, error_code: str | None = None) -> ActionResult:
        """Create a failure result."""
        return cls(success=False, error=error, error_code=error_code)

    @classmethod
    def ok(cls, changes: list[str] | None = None) -> ActionResult:
        """Create a success result."""
        return cls(success=True, changes=changes or [])


def apply_action(engine: GameEngine, action: Action) -> ActionResult:
    """
    Apply an action to an engine.

    Engine errors are returned as failures; anything else propagates.
    """
    handlers = {
        ActionType.SELECT: lambda: engine.select_pit(action.position),
        ActionType.COMMIT: engine.commit_last_selection,
        ActionType.UNDO: engine.undo_last_selection,
    }
    handler = handlers[action.action_type]
    if action.action_type == ActionType.SELECT and action.position is None:
        return ActionResult.failure(
            "Select requires a pit position",
            error_code=ErrorCode.OUT_OF_RANGE.value,
        )

    player = engine.current_player
    try:
        handler()
    except MancalaError as e:
        return ActionResult.failure(str(e), error_code=e.code.value)

    changes = [f"Player {PLAYER_NAMES[player]}: {action.describe()}"]
    if action.action_type == ActionType.SELECT and not engine.has_pending_commit:
        changes.append("Pit was empty, nothing sown")
    if engine.is_game_over:
        changes.append(f"Game over, player {PLAYER_NAMES[engine.winning_player]} wins")
    return ActionResult.ok(changes)
