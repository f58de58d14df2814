"""
Session Manager - Creates and tears down game sessions.

LIFECYCLE:
1. Caller creates a session (new engine + board view)
2. Presentation layer drives the engine through a GameLoop
3. Session ends -> every cell subscription is cleared and the
   session is forgotten

PERSISTENCE RULES:
- Sessions live in memory only
- Nothing about a game is saved or restored
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import logging
import time
import uuid

from ..config import GameConfig
from ..engine_core.game import GameEngine
from .board_view import BoardView

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """State of a game session."""
    ACTIVE = "active"  # Game in progress
    GAME_OVER = "game_over"  # Winner decided
    ABANDONED = "abandoned"  # Ended before a winner


@dataclass
class Session:
    """
    An ephemeral game session: one engine and the view that mirrors it.
    """
    session_id: str
    engine: GameEngine
    view: BoardView
    created_at: float
    state: SessionState = SessionState.ACTIVE

    def is_active(self) -> bool:
        """Check if session is still active."""
        return self.state == SessionState.ACTIVE and not self.engine.is_game_over


class SessionManager:
    """
    Manages game sessions.

    No persistence - sessions are in-memory only.
    """

    def __init__(self):
        self._sessions: dict[str, Session] = {}

    def create_session(
        self,
        initial_stones: int | None = None,
        config: GameConfig | None = None,
    ) -> Session:
        """
        Create a new game session.

        Args:
            initial_stones: Stones per pit; overrides config when given
            config: Game settings (defaults to the environment)

        Raises:
            ConfigurationError: If the stone count is out of range.
        """
        if initial_stones is not None:
            config = GameConfig.create(initial_stones=initial_stones)
        elif config is None:
            config = GameConfig.from_env()

        engine = config.build_engine()
        session = Session(
            session_id=str(uuid.uuid4()),
            engine=engine,
            view=BoardView(engine),
            created_at=time.time(),
        )
        self._sessions[session.session_id] = session
        logger.info(
            "Session %s created with %d stone(s) per pit",
            session.session_id,
            config.initial_stones,
        )
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str) -> Session | None:
        """
        End a session and clean up.

        Subscriptions are cleared so the engine and its view can be
        collected. Returns the ended session, or None if unknown.
        """
        session = self._sessions.pop(session_id, None)
        if session is None:
            return None

        session.state = (
            SessionState.GAME_OVER if session.engine.is_game_over else SessionState.ABANDONED
        )
        session.engine.clear_all_subscriptions()
        logger.info("Session %s ended (%s)", session_id, session.state.value)
        return session

    def list_active_sessions(self) -> list[str]:
        """List IDs of active sessions."""
        return [
            sid for sid, session in self._sessions.items()
            if session.is_active()
        ]
