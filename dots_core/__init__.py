"""
Dots and Boxes core Python package.

Pure game-state engine: every move takes an immutable GameState and returns a
new one, so front ends can render from whatever state they hold.
Modules:
- board.py: Line, Box, grid geometry
- state.py: GameState
- moves.py: initial_state, place_line, reset, queries
- display.py: status banner and ASCII board
- codec.py: JSON encoding for the web front end
"""
