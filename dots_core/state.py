from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple, Union

from .board import Box, Line, Player

TIE = "tie"
Winner = Optional[Union[Player, str]]  # 1, 2, 'tie' or None while the game runs


@dataclass(frozen=True)
class GameState:
    """Represents one immutable snapshot of a game: drawn lines, box owners, turn and scores."""
    rows: int
    cols: int
    lines: FrozenSet[Line]
    boxes: Tuple[Tuple[Box, ...], ...]  # boxes[row][col]
    current_player: Player  # 1 or 2
    scores: Tuple[int, int]
    game_over: bool = False
    winner: Winner = None

    def is_line_drawn(self, line: Line) -> bool:
        return line in self.lines

    def box_at(self, row: int, col: int) -> Box:
        return self.boxes[row][col]

    def other_player(self) -> Player:
        return 2 if self.current_player == 1 else 1

    def score_of(self, player: Player) -> int:
        return self.scores[player - 1]

    @property
    def total_boxes(self) -> int:
        return self.rows * self.cols

    @property
    def owned_count(self) -> int:
        return self.scores[0] + self.scores[1]
