from __future__ import annotations

# Facade module that re-exports the Dots and Boxes engine.
# The Flask app and tests import from here; single-responsibility modules live under dots_core/*.

from dots_core.board import (  # noqa: F401
    HORIZONTAL,
    VERTICAL,
    Box,
    Coord,
    Line,
    Player,
    adjacent_boxes,
    all_lines,
    box_lines,
    h,
    line_count,
    line_in_bounds,
    v,
)
from dots_core.state import TIE, GameState  # noqa: F401
from dots_core.moves import (  # noqa: F401
    MoveResult,
    available_lines,
    decide_winner,
    initial_state,
    is_box_complete,
    is_line_drawn,
    is_valid_line,
    place_line,
    place_line_result,
    reset,
)
from dots_core.display import render, score_line, status_text  # noqa: F401
from dots_core.codec import (  # noqa: F401
    box_to_json,
    line_from_json,
    line_to_json,
    state_from_json,
    state_to_json,
)


def main() -> None:
    # CLI driver delegated to dots_core.cli
    from dots_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
