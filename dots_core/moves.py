from __future__ import annotations

from typing import FrozenSet, List, NamedTuple, Tuple

from .board import Box, Line, Player, adjacent_boxes, all_lines, box_lines, line_in_bounds
from .state import TIE, GameState, Winner


class MoveResult(NamedTuple):
    """Outcome of a move attempt: the resulting state and what the move did."""
    state: GameState
    applied: bool
    boxes_completed: int


def initial_state(rows: int, cols: int) -> GameState:
    """Creates a fresh game: nothing drawn, nothing owned, Player 1 to move."""
    if not all(isinstance(n, int) and not isinstance(n, bool) for n in (rows, cols)) or rows <= 0 or cols <= 0:
        raise ValueError(f'Grid dimensions must be positive integers, got {rows}x{cols}')
    boxes = tuple(
        tuple(Box(r, c) for c in range(cols))
        for r in range(rows)
    )
    return GameState(
        rows=rows,
        cols=cols,
        lines=frozenset(),
        boxes=boxes,
        current_player=1,
        scores=(0, 0),
        game_over=False,
        winner=None,
    )


def reset(rows: int, cols: int) -> GameState:
    """Discards whatever game was in progress and starts a new one."""
    return initial_state(rows, cols)


def is_valid_line(state: GameState, line: Line) -> bool:
    return line_in_bounds(state.rows, state.cols, line)


def is_line_drawn(state: GameState, line: Line) -> bool:
    return state.is_line_drawn(line)


def is_box_complete(lines: FrozenSet[Line], row: int, col: int) -> bool:
    return all(side in lines for side in box_lines(row, col))


def decide_winner(scores: Tuple[int, int]) -> Winner:
    if scores[0] > scores[1]:
        return 1
    if scores[1] > scores[0]:
        return 2
    return TIE


def place_line_result(state: GameState, line: Line) -> MoveResult:
    """
    Attempts to draw a line and reports whether it was applied.

    Drawing a line that is already drawn, lies off the grid, or comes after
    the game has ended leaves the state untouched (same object returned).
    Otherwise every adjacent box the line closes goes to the mover, who then
    keeps the turn; a move that closes nothing passes the turn.
    """
    if state.game_over or line in state.lines or not is_valid_line(state, line):
        return MoveResult(state, False, 0)

    new_lines = state.lines | {line}
    mover: Player = state.current_player

    rows = [list(row) for row in state.boxes]
    completed = 0
    for (r, c) in adjacent_boxes(state.rows, state.cols, line):
        if rows[r][c].owner is None and is_box_complete(new_lines, r, c):
            rows[r][c] = rows[r][c].with_owner(mover)
            completed += 1

    scores = list(state.scores)
    scores[mover - 1] += completed
    new_scores = (scores[0], scores[1])

    game_over = new_scores[0] + new_scores[1] == state.rows * state.cols
    winner = decide_winner(new_scores) if game_over else None

    # Closing a box earns another turn, even on the final move.
    next_player = mover if completed > 0 else state.other_player()

    next_state = GameState(
        rows=state.rows,
        cols=state.cols,
        lines=new_lines,
        boxes=tuple(tuple(row) for row in rows),
        current_player=next_player,
        scores=new_scores,
        game_over=game_over,
        winner=winner,
    )
    return MoveResult(next_state, True, completed)


def place_line(state: GameState, line: Line) -> GameState:
    """Applies a move and returns the next state, or the same state if the move is illegal."""
    return place_line_result(state, line).state


def available_lines(state: GameState) -> List[Line]:
    """Lists every line still free to draw, horizontal lines first."""
    return [ln for ln in all_lines(state.rows, state.cols) if ln not in state.lines]
