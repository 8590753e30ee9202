"""Input adapter: turns key presses and typed text into core commands."""
from __future__ import annotations

import curses
from typing import Dict, List, Optional

from .commands import ActivateCell, Command, MoveCursor, NewGame, Quit
from .moves import Direction

_UP = MoveCursor(Direction.UP)
_DOWN = MoveCursor(Direction.DOWN)
_LEFT = MoveCursor(Direction.LEFT)
_RIGHT = MoveCursor(Direction.RIGHT)

KEYMAP: Dict[int, Command] = {
    ord('w'): _UP, ord('W'): _UP, curses.KEY_UP: _UP,
    ord('s'): _DOWN, ord('S'): _DOWN, curses.KEY_DOWN: _DOWN,
    ord('a'): _LEFT, ord('A'): _LEFT, curses.KEY_LEFT: _LEFT,
    ord('d'): _RIGHT, ord('D'): _RIGHT, curses.KEY_RIGHT: _RIGHT,
    ord(' '): ActivateCell(), ord('\n'): ActivateCell(), ord('\r'): ActivateCell(), curses.KEY_ENTER: ActivateCell(),
    ord('q'): Quit(), ord('Q'): Quit(),
    ord('r'): NewGame(), ord('R'): NewGame(),
}

WORDS: Dict[str, Command] = {
    'up': _UP, 'down': _DOWN, 'left': _LEFT, 'right': _RIGHT,
    'place': ActivateCell(), 'turn': ActivateCell(), 'go': ActivateCell(), 'x': ActivateCell(),
    'quit': Quit(), 'exit': Quit(), 'q': Quit(),
    'new': NewGame(), 'restart': NewGame(), 'r': NewGame(),
}

_STEPS = {'w': _UP, 's': _DOWN, 'a': _LEFT, 'd': _RIGHT}


def command_for_key(code: int) -> Optional[Command]:
    """Command bound to a curses key code, or None for unbound keys."""
    return KEYMAP.get(code)


def commands_for_text(line: str) -> List[Command]:
    """Parses a typed line such as "ddd place" or "right right turn".

    A token made only of w/a/s/d letters expands to one move per letter.
    Raises ValueError naming the first token that is not understood.
    """
    out: List[Command] = []
    for token in line.lower().split():
        if token in WORDS:
            out.append(WORDS[token])
        elif all(ch in _STEPS for ch in token):
            out.extend(_STEPS[ch] for ch in token)
        else:
            raise ValueError(f'unknown input: {token!r}')
    return out
