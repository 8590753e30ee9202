from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .board import CELL_COUNT, Board, Occupant, Player
from .commands import ActivateCell, Command, MoveCursor, NewGame, Quit
from .moves import Direction
from .state import GameState, TurnPhase


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a GameState handed to renderers."""
    active_player: Player
    cursor_index: int
    can_place: bool
    can_turn: bool
    board_occupancy: Tuple[Occupant, ...]
    phase: TurnPhase
    winner: Optional[Player] = None


def snapshot(state: GameState) -> Snapshot:
    return Snapshot(
        active_player=state.active_player,
        cursor_index=state.cursor,
        can_place=state.can_place,
        can_turn=state.can_turn,
        board_occupancy=state.board.cells,
        phase=state.phase,
        winner=state.winner,
    )


# ---------- JSON ----------
# Players travel as 1/2, empty cells as 0.

def _player_to_json(p: Optional[Player]) -> int:
    return 0 if p is None else int(p.value)


def _int_from_json(v: Any, name: str) -> int:
    # bool is an int subclass; reject it along with floats and numeric strings
    if isinstance(v, bool) or not isinstance(v, int):
        raise ValueError(f'bad {name}: {v!r}')
    return v


def _player_from_json(v: Any) -> Optional[Player]:
    n = _int_from_json(v, 'player')
    if n == 0:
        return None
    try:
        return Player(n)
    except ValueError:
        raise ValueError(f'bad player: {v!r}')


def _required_player(v: Any) -> Player:
    p = _player_from_json(v)
    if p is None:
        raise ValueError('player required')
    return p


def board_to_json(b: Board) -> List[int]:
    return [_player_to_json(c) for c in b.cells]


def board_from_json(cells: Any) -> Board:
    if not isinstance(cells, list) or len(cells) != CELL_COUNT:
        raise ValueError(f'board must be a list of {CELL_COUNT} cells')
    return Board(cells=tuple(_player_from_json(c) for c in cells))


def snapshot_to_json(snap: Snapshot) -> Dict[str, Any]:
    return {
        "activePlayer": _player_to_json(snap.active_player),
        "cursor": int(snap.cursor_index),
        "canPlace": bool(snap.can_place),
        "canTurn": bool(snap.can_turn),
        "board": [_player_to_json(c) for c in snap.board_occupancy],
        "phase": snap.phase.value,
        "winner": _player_to_json(snap.winner) or None,
    }


def state_to_json(s: GameState) -> Dict[str, Any]:
    return {
        "board": board_to_json(s.board),
        "cursor": int(s.cursor),
        "activePlayer": _player_to_json(s.active_player),
        "phase": s.phase.value,
        "lastPlaced": s.last_placed,
        "winner": _player_to_json(s.winner) or None,
    }


def json_to_state(obj: Any) -> GameState:
    if not isinstance(obj, dict):
        raise ValueError('state must be an object')
    try:
        phase = TurnPhase(obj.get("phase", TurnPhase.AWAITING_PLACEMENT.value))
        last = obj.get("lastPlaced")
        winner = obj.get("winner")
        return GameState(
            board=board_from_json(obj["board"]),
            cursor=_int_from_json(obj.get("cursor", 0), 'cursor'),
            active_player=_required_player(obj.get("activePlayer", 1)),
            phase=phase,
            last_placed=None if last is None else _int_from_json(last, 'lastPlaced'),
            winner=None if winner is None else _player_from_json(winner),
        )
    except KeyError as e:
        raise ValueError(f'missing field: {e.args[0]}')
    except TypeError as e:
        raise ValueError(f'bad state: {e}')


def command_from_json(obj: Any) -> Command:
    """Parses {"type": "move", "direction": "up"} / {"type": "activate"} / {"type": "quit"} / {"type": "new"}."""
    if isinstance(obj, str):
        obj = {"type": obj}
    if not isinstance(obj, dict):
        raise ValueError('command must be an object')
    kind = str(obj.get("type", "")).lower()
    if kind == "move":
        try:
            return MoveCursor(Direction(str(obj.get("direction", "")).lower()))
        except ValueError:
            raise ValueError(f'bad direction: {obj.get("direction")!r}')
    if kind == "activate":
        return ActivateCell()
    if kind == "quit":
        return Quit()
    if kind == "new":
        return NewGame()
    raise ValueError(f'unknown command type: {kind!r}')
