from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, NamedTuple, Optional, Tuple

Player = int  # 1 or 2
Coord = Tuple[int, int]

HORIZONTAL = "h"
VERTICAL = "v"
ORIENTATIONS = (HORIZONTAL, VERTICAL)


class Line(NamedTuple):
    """An edge between two adjacent dots, identified by its grid position and orientation."""
    row: int
    col: int
    orientation: str  # 'h' or 'v'


@dataclass(frozen=True)
class Box:
    """A unit square of the grid and the player who closed it, if any."""
    row: int
    col: int
    owner: Optional[Player] = None

    def with_owner(self, player: Player) -> 'Box':
        return Box(self.row, self.col, player)


def h(row: int, col: int) -> Line:
    return Line(row, col, HORIZONTAL)


def v(row: int, col: int) -> Line:
    return Line(row, col, VERTICAL)


def line_in_bounds(rows: int, cols: int, line: Line) -> bool:
    """Checks that a line lies on a rows x cols grid and has a known orientation."""
    if line.orientation == HORIZONTAL:
        return 0 <= line.row <= rows and 0 <= line.col < cols
    if line.orientation == VERTICAL:
        return 0 <= line.row < rows and 0 <= line.col <= cols
    return False


def box_lines(row: int, col: int) -> Tuple[Line, Line, Line, Line]:
    """Returns the four lines bordering a box: top, bottom, left, right."""
    return (
        h(row, col),
        h(row + 1, col),
        v(row, col),
        v(row, col + 1),
    )


def adjacent_boxes(rows: int, cols: int, line: Line) -> List[Coord]:
    """
    Finds the boxes a line borders.
    Interior lines touch two boxes, lines on the outer edge touch one.
    """
    r, c = line.row, line.col
    result: List[Coord] = []
    if line.orientation == HORIZONTAL:
        if r > 0:
            result.append((r - 1, c))  # above
        if r < rows:
            result.append((r, c))  # below
    else:
        if c > 0:
            result.append((r, c - 1))  # left
        if c < cols:
            result.append((r, c))  # right
    return result


def all_lines(rows: int, cols: int) -> Iterable[Line]:
    """Iterates over every line of the grid, horizontal lines first, row-major."""
    for r in range(rows + 1):
        for c in range(cols):
            yield h(r, c)
    for r in range(rows):
        for c in range(cols + 1):
            yield v(r, c)


def line_count(rows: int, cols: int) -> int:
    return (rows + 1) * cols + rows * (cols + 1)
