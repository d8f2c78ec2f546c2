from __future__ import annotations

import argparse
from typing import List, Optional

from .board import ORIENTATIONS, Line
from .config import default_dims
from .display import render, score_line, status_text
from .moves import initial_state, is_valid_line, place_line_result
from .state import GameState


def parse_move(text: str) -> Optional[Line]:
    """Parses 'h r c', 'v r c' or 'h,r,c' into a Line; None if it cannot be read."""
    sep = ',' if ',' in text else ' '
    parts = [t.strip() for t in text.strip().split(sep) if t.strip() != '']
    if len(parts) != 3:
        return None
    orientation = parts[0].lower()
    if orientation not in ORIENTATIONS:
        return None
    try:
        return Line(int(parts[1]), int(parts[2]), orientation)
    except ValueError:
        return None


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Dots and Boxes for two players at one terminal')
    parser.add_argument('--rows', type=int, default=None, help='Number of box rows (default: DOTS_ROWS or 4)')
    parser.add_argument('--cols', type=int, default=None, help='Number of box columns (default: DOTS_COLS or 4)')
    args = parser.parse_args(argv)

    rows, cols = default_dims(args.rows, args.cols)
    if rows <= 0 or cols <= 0:
        parser.error('--rows and --cols must be positive')
    state: GameState = initial_state(rows, cols)

    print(f'Dots and Boxes on a {rows}x{cols} grid. Enter moves as "h r c" or "v r c", "q" to quit.')
    while not state.game_over:
        print(render(state))
        print(f'{status_text(state)}  ({score_line(state)})')
        try:
            text = input('> ').strip()
        except EOFError:
            return
        if text.lower() in ('q', 'quit', 'exit'):
            return
        line = parse_move(text)
        if line is None:
            print('Could not parse. Try again.')
            continue
        if not is_valid_line(state, line):
            print('That line is off the board.')
            continue
        result = place_line_result(state, line)
        if not result.applied:
            print('Line already drawn.')
            continue
        if result.boxes_completed:
            noun = 'box' if result.boxes_completed == 1 else 'boxes'
            print(f'Player {state.current_player} completed {result.boxes_completed} {noun} and moves again.')
        state = result.state

    print(render(state))
    print(status_text(state))
    print(score_line(state))
