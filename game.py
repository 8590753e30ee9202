from __future__ import annotations

# Facade module that re-exports the Quadturn core.
# Single-responsibility modules live under quadturn_core/*.

from quadturn_core.board import (
    CELL_COUNT,
    DIVIDER_COL,
    DIVIDER_ROW,
    HEIGHT,
    WIDTH,
    Board,
    Player,
    coord_of,
    index_of,
    is_divider,
)
from quadturn_core.moves import Direction, move_cursor, opposite
from quadturn_core.errors import CellOccupied, DividerCell, GameError, IllegalAction
from quadturn_core.state import GameState, TurnPhase, new_game
from quadturn_core.rules import DEFAULT_RULES, NoOpTurn, NoWinner, Rules, TurnRule, WinRule
from quadturn_core.commands import (
    ActivateCell,
    MoveCursor,
    NewGame,
    Outcome,
    Quit,
    activate,
    apply_command,
    run_commands,
)
from quadturn_core.snapshot import (
    Snapshot,
    command_from_json,
    json_to_state,
    snapshot,
    snapshot_to_json,
    state_to_json,
)


def main() -> None:
    # CLI driver delegated to quadturn_core.cli
    from quadturn_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
