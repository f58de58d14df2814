"""
Board View - A presentation-side mirror of the board.

The view subscribes to every pit and store once and from then on learns
stone counts only through change notifications, the way a renderer
would. snapshot() returns a Pydantic model of what the view currently
shows.
"""

from __future__ import annotations
from typing import Optional

from pydantic import BaseModel, Field

from ..engine_core.game import GameEngine
from ..engine_core.state import MAX_PITS, MAX_PLAYERS, PLAYER_NAMES, GamePhase


class BoardSnapshot(BaseModel):
    """What a renderer shows after the last notification."""
    stores: list[int] = Field(description="Store counts, indexed by player")
    rows: list[list[int]] = Field(description="Pit counts per player, index 0..5")
    current_player: int
    phase: GamePhase
    winner: Optional[int] = None

    def render(self) -> str:
        """Plain-text board with player B's row reversed on top."""
        a, b = self.rows
        top = " ".join(f"{n:2d}" for n in reversed(b))
        bottom = " ".join(f"{n:2d}" for n in a)
        lines = [
            f"     B: {top}",
            f"[{self.stores[1]:2d}]{' ' * (len(top) + 6)}[{self.stores[0]:2d}]",
            f"     A: {bottom}",
        ]
        if self.winner is not None:
            lines.append(f"Game over - player {PLAYER_NAMES[self.winner]} wins")
        else:
            status = "pending commit" if self.phase == GamePhase.PENDING_COMMIT else "to move"
            lines.append(f"Player {PLAYER_NAMES[self.current_player]} {status}")
        return "\n".join(lines)


class BoardView:
    """Mirror of every cell value, kept current by subscriptions."""

    def __init__(self, engine: GameEngine):
        self.engine = engine
        self.stores = [0] * MAX_PLAYERS
        self.rows = [[0] * MAX_PITS for _ in range(MAX_PLAYERS)]
        self.notifications = 0
        self._attach()

    def _attach(self) -> None:
        for player in range(MAX_PLAYERS):
            store = self.engine.store(player)
            self.stores[player] = store.value
            store.subscribe(self._store_listener(player))
            for position in range(MAX_PITS):
                pit = self.engine.pit(player, position)
                self.rows[player][position] = pit.value
                pit.subscribe(self._pit_listener(player, position))

    def _store_listener(self, player: int):
        def on_change(value: int) -> None:
            self.stores[player] = value
            self.notifications += 1
        return on_change

    def _pit_listener(self, player: int, position: int):
        def on_change(value: int) -> None:
            self.rows[player][position] = value
            self.notifications += 1
        return on_change

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(
            stores=list(self.stores),
            rows=[list(row) for row in self.rows],
            current_player=self.engine.current_player,
            phase=self.engine.phase,
            winner=self.engine.winning_player,
        )
