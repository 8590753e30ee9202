from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable, Optional, Union

from .errors import GameError, IllegalAction
from .moves import Direction, move_cursor
from .rules import DEFAULT_RULES, Rules
from .state import GameState, TurnPhase, new_game

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveCursor:
    direction: Direction


@dataclass(frozen=True)
class ActivateCell:
    pass


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class NewGame:
    pass


Command = Union[MoveCursor, ActivateCell, Quit, NewGame]


@dataclass(frozen=True)
class Outcome:
    """Result of one command: the next state, the rejection reason if any, and whether to stop."""
    state: GameState
    error: Optional[GameError] = None
    quit: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


def _finish_action(state: GameState, rules: Rules, next_state: GameState) -> GameState:
    # A winner ends the game without handing the turn over.
    winner = rules.win.winner(next_state.board)
    if winner is not None:
        logger.info("player %s wins", winner.name)
        return replace(next_state, phase=TurnPhase.GAME_OVER, winner=winner, active_player=state.active_player)
    return next_state


def _place(state: GameState, rules: Rules) -> GameState:
    board = state.board.place(state.cursor, state.active_player)
    logger.debug("player %s placed on %d", state.active_player.name, state.cursor)
    placed = replace(state, board=board, phase=TurnPhase.AWAITING_TURN_ACTION, last_placed=state.cursor)
    return _finish_action(state, rules, placed)


def _turn(state: GameState, rules: Rules) -> GameState:
    if not rules.turn.is_legal(state):
        raise IllegalAction(rules.turn.describe(state))
    board = rules.turn.apply(state)
    logger.debug("player %s completed turn-action", state.active_player.name)
    turned = replace(
        state,
        board=board,
        phase=TurnPhase.AWAITING_PLACEMENT,
        last_placed=None,
        active_player=state.active_player.other(),
    )
    return _finish_action(state, rules, turned)


def activate(state: GameState, rules: Rules = DEFAULT_RULES) -> GameState:
    """Performs the action the current phase allows. Raises GameError when it is rejected."""
    if state.phase is TurnPhase.AWAITING_PLACEMENT:
        return _place(state, rules)
    if state.phase is TurnPhase.AWAITING_TURN_ACTION:
        return _turn(state, rules)
    raise IllegalAction('the game is over')


def apply_command(state: GameState, command: Command, rules: Rules = DEFAULT_RULES) -> Outcome:
    """Applies one command to `state` and returns the outcome. Never mutates `state`."""
    if isinstance(command, MoveCursor):
        return Outcome(state.with_cursor(move_cursor(state.cursor, command.direction)))
    if isinstance(command, ActivateCell):
        try:
            return Outcome(activate(state, rules))
        except GameError as e:
            logger.info("rejected action for player %s at %d: %s", state.active_player.name, state.cursor, e.message)
            return Outcome(state, error=e)
    if isinstance(command, Quit):
        return Outcome(state, quit=True)
    if isinstance(command, NewGame):
        logger.debug("new game")
        return Outcome(new_game())
    raise TypeError(f'unknown command: {command!r}')


def run_commands(state: GameState, commands: Iterable[Command], rules: Rules = DEFAULT_RULES) -> Outcome:
    """Feeds commands one at a time, stopping at Quit. Returns the last outcome."""
    outcome = Outcome(state)
    for command in commands:
        outcome = apply_command(outcome.state, command, rules)
        if outcome.quit:
            break
    return outcome
