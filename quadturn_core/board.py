from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple

from .errors import CellOccupied, DividerCell

WIDTH = 7
HEIGHT = 7
DIVIDER_ROW = 3
DIVIDER_COL = 3
CELL_COUNT = WIDTH * HEIGHT

Coord = Tuple[int, int]


class Player(Enum):
    ONE = 1
    TWO = 2

    def other(self) -> 'Player':
        return Player.TWO if self is Player.ONE else Player.ONE


Occupant = Optional[Player]


def check_index(index: int) -> int:
    if not 0 <= index < CELL_COUNT:
        raise ValueError(f'cell index out of range: {index}')
    return index


def index_of(r: int, c: int) -> int:
    """Flattened index of a row and column."""
    if not (0 <= r < HEIGHT and 0 <= c < WIDTH):
        raise ValueError(f'coordinate out of range: {(r, c)}')
    return r * WIDTH + c


def coord_of(index: int) -> Coord:
    check_index(index)
    return index // WIDTH, index % WIDTH


def is_divider(index: int) -> bool:
    """True for the cells of the cross that splits the board into four 3x3 quadrants."""
    check_index(index)
    return index // WIDTH == DIVIDER_ROW or index % WIDTH == DIVIDER_COL


@dataclass(frozen=True)
class Board:
    """The 7x7 board. Cells are row-major; None marks an empty cell."""
    cells: Tuple[Occupant, ...]

    def __post_init__(self) -> None:
        if len(self.cells) != CELL_COUNT:
            raise ValueError(f'board needs {CELL_COUNT} cells, got {len(self.cells)}')
        for i, occ in enumerate(self.cells):
            if occ is not None and is_divider(i):
                raise ValueError(f'divider cell {i} cannot hold a piece')

    @classmethod
    def empty(cls) -> 'Board':
        return cls(cells=(None,) * CELL_COUNT)

    def occupant(self, index: int) -> Occupant:
        return self.cells[check_index(index)]

    def place(self, index: int, player: Player) -> 'Board':
        """Returns a new board with `player` on `index`.

        Raises DividerCell for a divider and CellOccupied for a taken cell;
        the original board is never modified.
        """
        if is_divider(index):
            raise DividerCell(f'cell {index} is part of the divider')
        if self.cells[index] is not None:
            raise CellOccupied(f'cell {index} is already occupied by player {self.cells[index].name.lower()}')
        cells = list(self.cells)
        cells[index] = player
        return Board(cells=tuple(cells))

    def playable_indices(self) -> Iterable[int]:
        for i in range(CELL_COUNT):
            if not is_divider(i):
                yield i

    def is_full(self) -> bool:
        return all(self.cells[i] is not None for i in self.playable_indices())

    def pieces(self, player: Player) -> Tuple[int, ...]:
        return tuple(i for i, occ in enumerate(self.cells) if occ is player)
