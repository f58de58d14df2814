"""
Game Loop - Drives one session turn by turn.

The loop:
1. Presentation layer reports a pit click or a button
2. Loop turns it into an Action and applies it
3. Result carries the changes (or the error code) to show
4. View snapshot reflects the board after the command
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING

from ..engine_core.action import Action, ActionResult, apply_action

if TYPE_CHECKING:
    from .board_view import BoardSnapshot
    from .manager import Session

logger = logging.getLogger(__name__)


class GameLoop:
    """
    The main game loop driver.

    Usage:
        loop = GameLoop(session)
        result = loop.apply(Action.select(2))
        if result.success:
            result = loop.apply(Action.commit())
        show(loop.snapshot())
    """

    def __init__(self, session: Session):
        self.session = session
        self.history: list[Action] = []

    def apply(self, action: Action) -> ActionResult:
        result = apply_action(self.session.engine, action)
        if result.success:
            self.history.append(action)
        else:
            logger.warning(
                "Rejected %s in session %s: %s",
                action.describe(),
                self.session.session_id,
                result.error,
            )
        return result

    def play(self, position: int) -> ActionResult:
        """
        Select a pit and commit it straight away.

        An empty pit selects nothing, so there is nothing to commit.
        """
        result = self.apply(Action.select(position))
        if not result.success or not self.session.engine.has_pending_commit:
            return result
        commit = self.apply(Action.commit())
        if commit.success:
            commit.changes = result.changes + commit.changes
        return commit

    def snapshot(self) -> BoardSnapshot:
        return self.session.view.snapshot()
