from __future__ import annotations

from typing import Any, Dict, List, Optional

from .board import ORIENTATIONS, Box, Line, line_in_bounds
from .config import check_dims
from .display import status_text
from .moves import decide_winner, initial_state, is_box_complete
from .state import GameState


def json_int(value: Any, what: str) -> int:
    """Reads an int or a string of digits; bools, floats and anything else are rejected."""
    if isinstance(value, bool):
        raise ValueError(f"bad {what}: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        digits = text[1:] if text[:1] == "-" else text
        if digits.isdigit():
            return int(text)
    raise ValueError(f"bad {what}: {value!r}")


def line_to_json(line: Line) -> Dict[str, Any]:
    return {"row": int(line.row), "col": int(line.col), "orientation": line.orientation}


def line_from_json(obj: Any) -> Line:
    """Parses {"row", "col", "orientation"} (or a [row, col, orientation] triple) into a Line."""
    try:
        if isinstance(obj, dict):
            row, col, orientation = obj["row"], obj["col"], obj["orientation"]
        else:
            row, col, orientation = obj
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"bad line: {obj!r}") from e
    if not isinstance(orientation, str) or orientation.lower() not in ORIENTATIONS:
        raise ValueError(f"bad orientation: {orientation!r}")
    return Line(json_int(row, "line row"), json_int(col, "line col"), orientation.lower())


def box_to_json(box: Box) -> Dict[str, Any]:
    return {"row": box.row, "col": box.col, "owner": box.owner}


def state_to_json(s: GameState) -> Dict[str, Any]:
    return {
        "rows": int(s.rows),
        "cols": int(s.cols),
        "lines": [line_to_json(ln) for ln in sorted(s.lines)],
        "boxes": [[box_to_json(b) for b in row] for row in s.boxes],
        "currentPlayer": int(s.current_player),
        "scores": [int(s.scores[0]), int(s.scores[1])],
        "gameOver": bool(s.game_over),
        "winner": s.winner,
        "status": status_text(s),
    }


def _owner_from_json(raw: Any) -> Optional[int]:
    if raw is None:
        return None
    owner = json_int(raw, "box owner")
    if owner not in (1, 2):
        raise ValueError(f"bad box owner: {raw!r}")
    return owner


def _boxes_from_json(raw_boxes: Any, rows: int, cols: int) -> List[List[Box]]:
    if not isinstance(raw_boxes, list) or len(raw_boxes) != rows:
        raise ValueError(f"boxes must be a {rows}x{cols} grid")
    grid: List[List[Box]] = []
    for r, raw_row in enumerate(raw_boxes):
        if not isinstance(raw_row, list) or len(raw_row) != cols:
            raise ValueError(f"boxes must be a {rows}x{cols} grid")
        row: List[Box] = []
        for c, raw in enumerate(raw_row):
            if not isinstance(raw, dict):
                raise ValueError(f"bad box at ({r}, {c}): {raw!r}")
            row.append(Box(r, c, _owner_from_json(raw.get("owner"))))
        grid.append(row)
    return grid


def state_from_json(obj: Dict[str, Any]) -> GameState:
    """
    Rebuilds a GameState from its JSON form.

    Lines must lie on the grid, a box is owned exactly when its four sides are
    drawn, and scores must match box ownership. gameOver and winner are
    recomputed rather than read back.
    """
    if not isinstance(obj, dict):
        raise ValueError("state must be an object")
    if "rows" not in obj or "cols" not in obj:
        raise ValueError("bad dimensions: rows and cols are required")
    rows, cols = check_dims(json_int(obj["rows"], "rows"), json_int(obj["cols"], "cols"))
    base = initial_state(rows, cols)

    raw_lines = obj.get("lines")
    if raw_lines is None:
        raw_lines = []
    if not isinstance(raw_lines, list):
        raise ValueError("lines must be a list")
    lines = set()
    for raw in raw_lines:
        line = line_from_json(raw)
        if not line_in_bounds(rows, cols, line):
            raise ValueError(f"line off the grid: {line_to_json(line)}")
        lines.add(line)
    drawn = frozenset(lines)

    raw_boxes = obj.get("boxes")
    if raw_boxes is None:
        grid: List[List[Box]] = [list(row) for row in base.boxes]
    else:
        grid = _boxes_from_json(raw_boxes, rows, cols)

    counts = [0, 0]
    for r in range(rows):
        for c in range(cols):
            owner = grid[r][c].owner
            closed = is_box_complete(drawn, r, c)
            if (owner is not None) != closed:
                raise ValueError(f"box ({r}, {c}) ownership does not match its lines")
            if owner is not None:
                counts[owner - 1] += 1
    scores = (counts[0], counts[1])

    if "scores" in obj:
        raw_scores = obj["scores"]
        if not isinstance(raw_scores, list) or len(raw_scores) != 2:
            raise ValueError(f"bad scores: {raw_scores!r}")
        given = [json_int(x, "score") for x in raw_scores]
        if given != counts:
            raise ValueError(f"scores {given} do not match owned boxes {counts}")

    current = json_int(obj.get("currentPlayer", 1), "currentPlayer")
    if current not in (1, 2):
        raise ValueError(f"bad currentPlayer: {current}")

    game_over = scores[0] + scores[1] == rows * cols
    return GameState(
        rows=rows,
        cols=cols,
        lines=drawn,
        boxes=tuple(tuple(row) for row in grid),
        current_player=current,
        scores=scores,
        game_over=game_over,
        winner=decide_winner(scores) if game_over else None,
    )
