"""
Pytest fixtures for Kalah tests.
"""

import pytest

from ..engine_core.game import GameEngine
from ..engine_core.state import MAX_INITIAL_STONES, MAX_PITS, MAX_PLAYERS
from ..session import BoardView, SessionManager

# Ten select+commit moves from a 4-per-pit board that empty player A's row.
WINNING_GAME = [0, 0, 1, 2, 0, 3, 0, 4, 0, 5]


class CellRecorder:
    """
    Mirrors every cell through its subscriptions only, like a renderer.

    Also records every value ever observed so tests can check that no
    notification carried a negative count.
    """

    def __init__(self, engine: GameEngine):
        self.stores = [0] * MAX_PLAYERS
        self.board = [[engine.initial_stones] * MAX_PITS for _ in range(MAX_PLAYERS)]
        self.seen: list[int] = []
        for player in range(MAX_PLAYERS):
            engine.subscribe_store(player, self._store(player))
            for position in range(MAX_PITS):
                engine.subscribe_pit(player, position, self._pit(player, position))

    def _store(self, player):
        def listener(value):
            self.stores[player] = value
            self.seen.append(value)
        return listener

    def _pit(self, player, position):
        def listener(value):
            self.board[player][position] = value
            self.seen.append(value)
        return listener


@pytest.fixture
def game() -> GameEngine:
    """A 4-stones-per-pit game; subscriptions are cleared afterwards."""
    engine = GameEngine(MAX_INITIAL_STONES)
    yield engine
    engine.clear_all_subscriptions()


@pytest.fixture
def recorder(game: GameEngine) -> CellRecorder:
    return CellRecorder(game)


@pytest.fixture
def view(game: GameEngine) -> BoardView:
    return BoardView(game)


@pytest.fixture
def session_manager() -> SessionManager:
    return SessionManager()


def arrange(engine: GameEngine, row_a, row_b, stores) -> None:
    """Set every cell to the given counts and commit them as the baseline."""
    for player, values in enumerate((row_a, row_b)):
        for pit, value in zip(engine.row(player), values):
            pit.take_all()
            pit.add(value)
            pit.commit()
    for store, value in zip((engine.store(0), engine.store(1)), stores):
        store.take_all()
        store.add(value)
        store.commit()


def play(engine: GameEngine, *positions: int) -> None:
    """Select and commit each position in turn."""
    for position in positions:
        engine.select_pit(position)
        engine.commit_last_selection()
