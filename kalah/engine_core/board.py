"""
Board - Rows of pits and scoring stores.

A store is one observable cell. A row is a fixed sequence of MAX_PITS
observable cells. The board holds one row and one store per player,
indexed by player id.
"""

from __future__ import annotations
from typing import Iterator

from .cell import ObservableCell
from .state import MAX_PITS, MAX_PLAYERS


class Pit(ObservableCell):
    """One stone-holding pit in a player's row."""


class Store(ObservableCell):
    """A player's scoring store. Never receives stones from an opponent's sow."""


class Row:
    """Exactly MAX_PITS pits, indexed 0..MAX_PITS-1, fixed for the game."""

    def __init__(self, initial_stones: int):
        self._pits = tuple(Pit(initial_stones) for _ in range(MAX_PITS))

    def __getitem__(self, position: int) -> Pit:
        return self._pits[position]

    def __iter__(self) -> Iterator[Pit]:
        return iter(self._pits)

    def __len__(self) -> int:
        return len(self._pits)

    @property
    def is_empty(self) -> bool:
        return all(pit.is_empty for pit in self._pits)

    @property
    def values(self) -> list[int]:
        return [pit.value for pit in self._pits]

    def take_all(self) -> int:
        """Empty every pit in the row and return the total removed."""
        return sum(pit.take_all() for pit in self._pits)


class Board:
    """Two rows and two stores."""

    def __init__(self, initial_stones: int):
        self.rows = tuple(Row(initial_stones) for _ in range(MAX_PLAYERS))
        self.stores = tuple(Store() for _ in range(MAX_PLAYERS))

    def cells(self) -> Iterator[ObservableCell]:
        """Every cell on the board: each player's store, then that player's pits."""
        for player in range(MAX_PLAYERS):
            yield self.stores[player]
            yield from self.rows[player]

    def total_stones(self) -> int:
        return sum(cell.value for cell in self.cells())

    def commit(self) -> None:
        for cell in self.cells():
            cell.commit()

    def undo(self) -> None:
        for cell in self.cells():
            cell.undo()

    def clear_subscribers(self) -> None:
        for cell in self.cells():
            cell.clear_subscribers()
