"""
Quadturn core Python package.

The game state machine and its thin I/O shells. Everything in the core is
pure: commands take a GameState and return a new one.
Modules:
- board.py: Board, Player, divider geometry
- moves.py: Direction, cursor arithmetic (flat-ring wrap)
- state.py: GameState, TurnPhase
- rules.py: TurnRule / WinRule extension points
- commands.py: MoveCursor, ActivateCell, Quit, NewGame, apply_command
- snapshot.py: read-only Snapshot and JSON codecs
- keys.py, render.py, tui.py, cli.py: input adapter and front ends
"""
