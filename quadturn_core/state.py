from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from .board import Board, Player, check_index


class TurnPhase(Enum):
    AWAITING_PLACEMENT = 'awaiting_placement'
    AWAITING_TURN_ACTION = 'awaiting_turn_action'
    GAME_OVER = 'game_over'  # only reached when a win rule reports a winner


@dataclass(frozen=True)
class GameState:
    """Represents the whole game: board, cursor, whose turn it is and which phase of the turn is active."""
    board: Board
    cursor: int
    active_player: Player
    phase: TurnPhase
    last_placed: Optional[int] = None  # piece placed this turn, awaiting its turn-action
    winner: Optional[Player] = None

    def __post_init__(self) -> None:
        check_index(self.cursor)
        if (self.winner is not None) != (self.phase is TurnPhase.GAME_OVER):
            raise ValueError('a winner exists exactly when the game is over')
        if self.phase is TurnPhase.AWAITING_TURN_ACTION and self.last_placed is None:
            raise ValueError('a turn-action needs the piece placed this turn')
        if self.last_placed is not None:
            check_index(self.last_placed)
            if self.phase is TurnPhase.AWAITING_PLACEMENT:
                raise ValueError('no piece is pending while awaiting placement')
            if self.board.occupant(self.last_placed) is not self.active_player:
                raise ValueError(f'cell {self.last_placed} does not hold a piece of the active player')

    @property
    def can_place(self) -> bool:
        return self.phase is TurnPhase.AWAITING_PLACEMENT

    @property
    def can_turn(self) -> bool:
        return self.phase is TurnPhase.AWAITING_TURN_ACTION

    @property
    def is_over(self) -> bool:
        return self.phase is TurnPhase.GAME_OVER

    def with_cursor(self, cursor: int) -> 'GameState':
        return replace(self, cursor=cursor)


def new_game() -> GameState:
    return GameState(
        board=Board.empty(),
        cursor=0,
        active_player=Player.ONE,
        phase=TurnPhase.AWAITING_PLACEMENT,
    )
