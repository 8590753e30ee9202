"""
Pluggable game rules.

What a "turn" does to the placed piece and when the game is won are not
fixed by the core. The state machine asks a TurnRule whether the turn-action
is legal and what board it produces, and asks a WinRule after each
successful action whether someone has won. The defaults always accept the
turn-action, leave the board untouched and never declare a winner.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from .board import Board, Player
from .state import GameState


class TurnRule(ABC):
    @abstractmethod
    def is_legal(self, state: GameState) -> bool:
        ...

    @abstractmethod
    def apply(self, state: GameState) -> Board:
        ...

    def describe(self, state: GameState) -> str:
        """Reason shown to the player when is_legal() returns False."""
        return 'turn-action is not allowed here'


class WinRule(ABC):
    @abstractmethod
    def winner(self, board: Board) -> Optional[Player]:
        ...


class NoOpTurn(TurnRule):
    """Accepts the turn-action and leaves the board as it is."""

    def is_legal(self, state: GameState) -> bool:
        return True

    def apply(self, state: GameState) -> Board:
        return state.board


class NoWinner(WinRule):
    def winner(self, board: Board) -> Optional[Player]:
        return None


@dataclass(frozen=True)
class Rules:
    turn: TurnRule = field(default_factory=NoOpTurn)
    win: WinRule = field(default_factory=NoWinner)


DEFAULT_RULES = Rules()
