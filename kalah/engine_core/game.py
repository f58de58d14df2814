"""
Game Engine - Sowing, capture, extra turns, and win detection.

The engine is the single owner of the board. A turn follows the protocol:

    select_pit(position)      IDLE -> PENDING_COMMIT
    undo_last_selection()     optional, at most once per turn
    commit_last_selection()   PENDING_COMMIT -> IDLE or GAME_OVER

Callers observe stone counts only through cell subscriptions; every
mutation notifies synchronously before the command returns.
"""

from __future__ import annotations
import logging

from .board import Board, Pit, Row, Store
from .cell import Subscriber
from .errors import ConfigurationError, GameOverError, IllegalStateError, OutOfRangeError
from .state import (
    MAX_INITIAL_STONES,
    MAX_PITS,
    MAX_PLAYERS,
    MIN_INITIAL_STONES,
    PLAYER_A,
    PLAYER_B,
    PLAYER_NAMES,
    GamePhase,
    TurnState,
    opponent,
    opposite_position,
)

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Two-player Kalah rule engine.

    Args:
        initial_stones: Stones placed in each of the twelve pits,
            between MIN_INITIAL_STONES and MAX_INITIAL_STONES.

    Raises:
        ConfigurationError: If initial_stones is out of range.
    """

    MAX_PLAYERS = MAX_PLAYERS
    MAX_PITS = MAX_PITS
    PLAYER_A = PLAYER_A
    PLAYER_B = PLAYER_B
    MIN_INITIAL_STONES = MIN_INITIAL_STONES
    MAX_INITIAL_STONES = MAX_INITIAL_STONES

    def __init__(self, initial_stones: int = MIN_INITIAL_STONES):
        if not MIN_INITIAL_STONES <= initial_stones <= MAX_INITIAL_STONES:
            raise ConfigurationError(
                f"Initial stones must be between {MIN_INITIAL_STONES} "
                f"and {MAX_INITIAL_STONES}, got {initial_stones}"
            )
        self.initial_stones = initial_stones
        self._board = Board(initial_stones)
        self._turn = TurnState()

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def current_player(self) -> int:
        return self._turn.current_player

    @property
    def phase(self) -> GamePhase:
        return self._turn.phase

    @property
    def winning_player(self) -> int | None:
        """The winner, or None while the game is still going."""
        return self._turn.winning_player

    @property
    def is_game_over(self) -> bool:
        return self._turn.is_game_over

    @property
    def has_undo_available(self) -> bool:
        return self._turn.has_undo_available

    @property
    def has_pending_commit(self) -> bool:
        return self._turn.has_pending_commit

    @property
    def has_extra_turn(self) -> bool:
        return self._turn.has_extra_turn

    def pit(self, player: int, position: int) -> Pit:
        self._check_player(player)
        self._check_position(position)
        return self._board.rows[player][position]

    def row(self, player: int) -> Row:
        self._check_player(player)
        return self._board.rows[player]

    def store(self, player: int) -> Store:
        self._check_player(player)
        return self._board.stores[player]

    def total_stones(self) -> int:
        return self._board.total_stones()

    # =========================================================================
    # Subscriptions
    # =========================================================================

    def subscribe_pit(self, player: int, position: int, callback: Subscriber) -> None:
        self.pit(player, position).subscribe(callback)

    def subscribe_store(self, player: int, callback: Subscriber) -> None:
        self.store(player).subscribe(callback)

    def clear_all_subscriptions(self) -> None:
        """Drop every subscriber on every pit and store."""
        self._board.clear_subscribers()

    # =========================================================================
    # Commands
    # =========================================================================

    def select_pit(self, position: int) -> None:
        """
        Sow the stones of the current player's pit at position.

        Selecting an empty pit is a legal no-op and leaves the engine idle.

        Raises:
            GameOverError: If a winner was already decided.
            IllegalStateError: If a selection is waiting to be committed.
            OutOfRangeError: If position is not within [0, MAX_PITS).
        """
        self._ensure_not_over()
        if self._turn.has_pending_commit:
            raise IllegalStateError("The last selection has to be committed first")
        self._check_position(position)

        player = self._turn.current_player
        rows = self._board.rows
        stores = self._board.stores

        stones = rows[player][position].take_all()
        if stones == 0:
            logger.debug("Player %s selected empty pit %d", PLAYER_NAMES[player], position)
            return

        logger.debug(
            "Player %s sows %d stone(s) from pit %d", PLAYER_NAMES[player], stones, position
        )
        self._turn.phase = GamePhase.PENDING_COMMIT

        row = player
        position += 1
        while stones > 0:
            while position < MAX_PITS and stones > 0:
                rows[row][position].add_one()
                stones -= 1
                position += 1

            if stones > 0 and row == player:
                stores[player].add_one()
                stones -= 1
                # Last stone in the mover's own store
                if stones == 0 and position == MAX_PITS:
                    self._turn.has_extra_turn = True
                    logger.debug("Player %s earned an extra turn", PLAYER_NAMES[player])
                    break

            if stones == 0 and row == player and rows[row][position - 1].value == 1:
                self._capture(player, position - 1)

            row = opponent(row)
            position = 0

    def commit_last_selection(self) -> None:
        """
        Make the pending selection the new baseline and advance the turn.

        Runs win detection afterwards.

        Raises:
            GameOverError: If a winner was already decided.
            IllegalStateError: If there is no pending selection.
        """
        self._ensure_not_over()
        if not self._turn.has_pending_commit:
            raise IllegalStateError("There is no pending selection to commit")

        self._board.commit()
        self._turn.phase = GamePhase.IDLE
        self._turn.has_undo_available = True
        if self._turn.has_extra_turn:
            self._turn.has_extra_turn = False
        else:
            self._turn.current_player = opponent(self._turn.current_player)

        logger.debug(
            "Selection committed, player %s to move", PLAYER_NAMES[self._turn.current_player]
        )
        self._check_for_winner()

    def undo_last_selection(self) -> None:
        """
        Revert every cell to its last committed value.

        The selection stays pending and a previously earned extra turn is
        kept: a commit is still required to return to IDLE.

        Raises:
            GameOverError: If a winner was already decided.
            IllegalStateError: If nothing is pending or the undo was already used.
        """
        self._ensure_not_over()
        if not self._turn.has_pending_commit:
            raise IllegalStateError("There is no pending selection to undo")
        if not self._turn.has_undo_available:
            raise IllegalStateError("The current player cannot undo multiple times")

        self._board.undo()
        self._turn.has_undo_available = False
        logger.debug("Player %s undid the last selection", PLAYER_NAMES[self._turn.current_player])

    # =========================================================================
    # Internals
    # =========================================================================

    def _ensure_not_over(self) -> None:
        if self._turn.is_game_over:
            raise GameOverError()

    @staticmethod
    def _check_player(player: int) -> None:
        if player not in (PLAYER_A, PLAYER_B):
            raise OutOfRangeError(f"Player {player} is not PLAYER_A or PLAYER_B")

    @staticmethod
    def _check_position(position: int) -> None:
        if not 0 <= position < MAX_PITS:
            raise OutOfRangeError(f"Pit position {position} is not within [0, {MAX_PITS})")

    def _capture(self, player: int, position: int) -> None:
        """Move the landing pit and the pit across from it into the player's store."""
        captured = self._board.rows[opponent(player)][opposite_position(position)].take_all()
        captured += self._board.rows[player][position].take_all()
        self._board.stores[player].add(captured)
        logger.debug(
            "Player %s captured %d stone(s) at pit %d", PLAYER_NAMES[player], captured, position
        )

    def _check_for_winner(self) -> None:
        """
        End the game once a row is empty.

        Only the first empty row (in player order) is handled: the other
        player's remaining stones go to that player's store, and the larger
        store wins. Ties go to player B.
        """
        rows = self._board.rows
        stores = self._board.stores
        for player in range(MAX_PLAYERS):
            if not rows[player].is_empty:
                continue

            other = opponent(player)
            stores[other].add(rows[other].take_all())

            winner = PLAYER_A if stores[PLAYER_A].value > stores[PLAYER_B].value else PLAYER_B
            self._turn.end_game(winner)
            logger.info(
                "Game over: player %s wins (%d - %d)",
                PLAYER_NAMES[winner],
                stores[PLAYER_A].value,
                stores[PLAYER_B].value,
            )
            break

    def __repr__(self) -> str:
        return (
            f"GameEngine(rows={[row.values for row in self._board.rows]}, "
            f"stores={[store.value for store in self._board.stores]}, "
            f"current_player={self._turn.current_player}, phase={self._turn.phase.value})"
        )
