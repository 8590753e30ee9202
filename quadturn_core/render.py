from __future__ import annotations

from typing import Dict, List, Optional

from .board import DIVIDER_COL, DIVIDER_ROW, HEIGHT, WIDTH, Player
from .errors import GameError
from .snapshot import Snapshot

PLAYER_LABELS: Dict[Player, str] = {Player.ONE: 'One', Player.TWO: 'Two'}
PLAYER_SYMBOLS: Dict[Player, str] = {Player.ONE: 'X', Player.TWO: 'O'}


def player_label(p: Player) -> str:
    return PLAYER_LABELS[p]


def status_line(snap: Snapshot) -> str:
    if snap.winner is not None:
        return f"Winner: {player_label(snap.winner)}"
    place = 'Can place' if snap.can_place else "Can't place"
    turn = 'Can turn' if snap.can_turn else "Can't turn"
    return f"Active player: {player_label(snap.active_player)} | {place} | {turn}"


def cell_symbol(snap: Snapshot, r: int, c: int) -> str:
    if r == DIVIDER_ROW and c == DIVIDER_COL:
        return '+'
    if r == DIVIDER_ROW:
        return '-'
    if c == DIVIDER_COL:
        return '|'
    occ = snap.board_occupancy[r * WIDTH + c]
    return '.' if occ is None else PLAYER_SYMBOLS[occ]


def board_rows(snap: Snapshot) -> List[str]:
    """One string per board row; the cursor cell is wrapped in brackets."""
    rows: List[str] = []
    for r in range(HEIGHT):
        row: List[str] = []
        for c in range(WIDTH):
            sym = cell_symbol(snap, r, c)
            if r * WIDTH + c == snap.cursor_index:
                row.append(f"[{sym}]")
            else:
                row.append(f" {sym} ")
        rows.append(''.join(row))
    return rows


def render_board(snap: Snapshot) -> str:
    return '\n'.join(['Board'] + board_rows(snap))


def render(snap: Snapshot, error: Optional[GameError] = None) -> str:
    """Status line, board and, if the last action was rejected, the reason."""
    lines = [status_line(snap), '', render_board(snap)]
    if error is not None:
        lines.append('')
        lines.append(f"! {error.message}")
    return '\n'.join(lines)
