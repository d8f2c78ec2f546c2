from __future__ import annotations

from typing import List

from .board import h, v
from .state import TIE, GameState


def status_text(state: GameState) -> str:
    """Human readable turn or result banner."""
    if not state.game_over:
        return f"Player {state.current_player}'s turn"
    if state.winner == TIE:
        return "It's a Tie!"
    return f"Player {state.winner} Wins!"


def score_line(state: GameState) -> str:
    return f"{state.scores[0]} - {state.scores[1]}"


def render(state: GameState) -> str:
    """Draws the board as ASCII art: '+' dots, '---' and '|' lines, owner digits inside boxes."""
    out: List[str] = []
    for r in range(state.rows + 1):
        dots: List[str] = ["+"]
        for c in range(state.cols):
            dots.append("---" if state.is_line_drawn(h(r, c)) else "   ")
            dots.append("+")
        out.append("".join(dots))
        if r == state.rows:
            break
        cells: List[str] = []
        for c in range(state.cols + 1):
            cells.append("|" if state.is_line_drawn(v(r, c)) else " ")
            if c < state.cols:
                owner = state.box_at(r, c).owner
                cells.append(f" {owner} " if owner is not None else "   ")
        out.append("".join(cells))
    return "\n".join(out)
