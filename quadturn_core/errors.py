from __future__ import annotations


class GameError(Exception):
    """Base class for recoverable game errors. A rejected action leaves the state unchanged."""
    kind = "game_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_json(self) -> dict:
        return {"kind": self.kind, "message": self.message}


class DividerCell(GameError):
    kind = "divider_cell"


class CellOccupied(GameError):
    kind = "cell_occupied"


class IllegalAction(GameError):
    kind = "illegal_action"
