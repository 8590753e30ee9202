from __future__ import annotations

import argparse
import logging
from typing import Callable, List, Optional

from .commands import apply_command
from .config import LOG_LEVELS, UI_CHOICES, Settings
from .errors import GameError
from .keys import commands_for_text
from .log import configure_logging
from .render import render
from .rules import DEFAULT_RULES, Rules
from .snapshot import snapshot
from .state import GameState, new_game
from .tui import run as run_curses

logger = logging.getLogger(__name__)

TEXT_HELP = "Moves: w/a/s/d (e.g. 'ddd') or up/down/left/right. 'place' or 'turn' to act, 'new' to restart, 'q' to quit."


def run_text(
    rules: Rules = DEFAULT_RULES,
    input_fn: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
    state: Optional[GameState] = None,
) -> GameState:
    """Line-based game loop for terminals without curses (and for scripted play)."""
    state = state or new_game()
    error: Optional[GameError] = None
    output(TEXT_HELP)
    while True:
        output(render(snapshot(state), error))
        try:
            text = input_fn('> ')
        except EOFError:
            return state
        try:
            commands = commands_for_text(text)
        except ValueError as e:
            output(f"Could not parse: {e}. Try again.")
            error = None
            continue
        for command in commands:
            outcome = apply_command(state, command, rules)
            if outcome.quit:
                return outcome.state
            state, error = outcome.state, outcome.error
            if error is not None:
                # the rest of the line was typed assuming this action worked
                break


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Quadturn: two-player place-and-turn board game')
    parser.add_argument('--ui', choices=list(UI_CHOICES), default=settings.ui, help='Front end: curses or text')
    parser.add_argument('--log-level', choices=list(LOG_LEVELS), default=settings.log_level, help='Logging level')
    parser.add_argument('--log-file', default=settings.log_file, help='Write logs to this file')
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    settings = Settings.from_env()
    args = build_parser(settings).parse_args(argv)

    # curses owns the screen, so only log there when a file was given
    configure_logging(args.log_level, args.log_file, stream=(args.ui == 'text'))
    logger.debug("starting %s ui", args.ui)

    if args.ui == 'text':
        run_text()
        return
    run_curses()
