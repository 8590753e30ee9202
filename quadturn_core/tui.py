"""curses front end: draws snapshots and feeds key presses to the state machine."""
from __future__ import annotations

import curses
import logging
from typing import Optional

from .board import WIDTH
from .commands import apply_command
from .errors import GameError
from .keys import command_for_key
from .render import board_rows, status_line
from .rules import DEFAULT_RULES, Rules
from .snapshot import Snapshot, snapshot
from .state import GameState, new_game

logger = logging.getLogger(__name__)

HELP = "w/a/s/d or arrows: move  enter/space: place or turn  r: new game  q: quit"


def _addstr(win, y: int, x: int, text: str, attr: int = 0) -> None:
    # Writes that do not fit a small terminal are clipped, not fatal.
    maxy, maxx = win.getmaxyx()
    if y >= maxy or x >= maxx:
        return
    try:
        win.addstr(y, x, text[: maxx - x - 1], attr)
    except curses.error:
        pass


def draw(win, snap: Snapshot, error: Optional[GameError]) -> None:
    win.erase()
    _addstr(win, 0, 0, status_line(snap), curses.A_BOLD)
    _addstr(win, 2, 0, "Board")
    for i, row in enumerate(board_rows(snap)):
        _addstr(win, 3 + i, 0, row)
        # highlight the bracketed cursor cell
        if snap.cursor_index // WIDTH == i:
            col = (snap.cursor_index % WIDTH) * 3
            _addstr(win, 3 + i, col, row[col:col + 3], curses.A_REVERSE)
    _addstr(win, 11, 0, HELP, curses.A_DIM)
    if error is not None:
        _addstr(win, 13, 0, error.message)
    win.refresh()


def run_app(stdscr, rules: Rules = DEFAULT_RULES, state: Optional[GameState] = None) -> GameState:
    """Blocking key loop. Returns the final state when the player quits."""
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    stdscr.keypad(True)
    state = state or new_game()
    error: Optional[GameError] = None
    while True:
        draw(stdscr, snapshot(state), error)
        key = stdscr.getch()
        command = command_for_key(key)
        if command is None:
            continue
        outcome = apply_command(state, command, rules)
        if outcome.quit:
            logger.debug("quit requested")
            return outcome.state
        state, error = outcome.state, outcome.error


def run(rules: Rules = DEFAULT_RULES) -> GameState:
    # curses.wrapper restores the terminal even if the loop raises.
    return curses.wrapper(run_app, rules)
