"""
Session Module - Manages ephemeral game sessions.

A session represents one play-through of a game:
- Created when a game starts
- Holds the engine and a view mirroring its cells
- Destroyed when the game ends, clearing every subscription
"""

from .manager import SessionManager, Session, SessionState
from .game_loop import GameLoop
from .board_view import BoardView, BoardSnapshot

__all__ = [
    "SessionManager",
    "Session",
    "SessionState",
    "GameLoop",
    "BoardView",
    "BoardSnapshot",
]
