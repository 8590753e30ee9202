from __future__ import annotations

from enum import Enum
from typing import Dict

from .board import CELL_COUNT, WIDTH, check_index


class Direction(Enum):
    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'


OFFSETS: Dict[Direction, int] = {
    Direction.UP: -WIDTH,
    Direction.DOWN: WIDTH,
    Direction.LEFT: -1,
    Direction.RIGHT: 1,
}

_OPPOSITES: Dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def opposite(direction: Direction) -> Direction:
    return _OPPOSITES[direction]


def move_cursor(current: int, direction: Direction) -> int:
    """Moves the cursor one step over the flattened 49-cell ring.

    Wrap policy is a flat ring, not a torus: LEFT from column 0 lands on the
    last column of the previous row (and from cell 0 on cell 48). Vertical
    moves keep the column because 49 is a multiple of the width.
    """
    check_index(current)
    return (current + OFFSETS[direction]) % CELL_COUNT
