"""
Text rendering for mazes.

Each cell is a three character body framed by walls, so a grid renders as
2*rows+1 lines of 4*columns+1 characters:

    +---+---+
    | 0   1 |
    +   +---+
    | 1   2 |
    +---+---+

Two styles are available: plain "ascii" (+ - |) and "unicode" box drawing,
where each corner glyph is picked from the wall segments meeting there.
"""

from typing import Dict, List, Mapping, NamedTuple, Optional, Tuple

from gridmaze.core.grid import Cell, Grid

BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


class Style(NamedTuple):
    horizontal: str
    vertical: str
    corners: Optional[Dict[Tuple[bool, bool, bool, bool], str]]
    corner: str = "+"


# (up, right, down, left) -> glyph
BOX_CORNERS = {
    (False, False, False, False): " ",
    (False, False, False, True): "╴",
    (False, False, True, False): "╷",
    (False, False, True, True): "┐",
    (False, True, False, False): "╶",
    (False, True, False, True): "─",
    (False, True, True, False): "┌",
    (False, True, True, True): "┬",
    (True, False, False, False): "╵",
    (True, False, False, True): "┘",
    (True, False, True, False): "│",
    (True, False, True, True): "┤",
    (True, True, False, False): "└",
    (True, True, False, True): "┴",
    (True, True, True, False): "├",
    (True, True, True, True): "┼",
}

STYLES = {
    "ascii": Style(horizontal="---", vertical="|", corners=None),
    "unicode": Style(horizontal="───", vertical="│", corners=BOX_CORNERS),
}


def to_base36(value: int) -> str:
    if value < 0:
        raise ValueError(f"Distance must be non-negative, got {value}")
    digits = []
    while True:
        value, rem = divmod(value, 36)
        digits.append(BASE36[rem])
        if value == 0:
            break
    return "".join(reversed(digits))


def cell_body(cell: Cell, distances: Optional[Mapping] = None) -> str:
    if distances is None or cell not in distances:
        return "   "
    # Wider values keep their low-order digits so the layout stays fixed
    return to_base36(distances[cell])[-3:].center(3)


def _vertical_wall(grid: Grid, row: int, line: int) -> bool:
    """Wall on column line `line` (0..columns) beside cell row `row`."""
    if line == 0 or line == grid.columns:
        return True
    return grid.has_wall((row, line - 1), Grid.EAST)


def _horizontal_wall(grid: Grid, line: int, column: int) -> bool:
    """Wall on row line `line` (0..rows) above/below cell column `column`."""
    if line == 0 or line == grid.rows:
        return True
    return grid.has_wall((line - 1, column), Grid.SOUTH)


def _corner(grid: Grid, style: Style, line: int, column_line: int) -> str:
    if style.corners is None:
        return style.corner
    up = line > 0 and _vertical_wall(grid, line - 1, column_line)
    down = line < grid.rows and _vertical_wall(grid, line, column_line)
    left = column_line > 0 and _horizontal_wall(grid, line, column_line - 1)
    right = column_line < grid.columns and _horizontal_wall(grid, line, column_line)
    return style.corners[(up, right, down, left)]


def _wall_line(grid: Grid, style: Style, line: int) -> str:
    parts = [_corner(grid, style, line, 0)]
    for column in range(grid.columns):
        parts.append(style.horizontal if _horizontal_wall(grid, line, column) else "   ")
        parts.append(_corner(grid, style, line, column + 1))
    return "".join(parts)


def _body_line(grid: Grid, style: Style, row: int, distances) -> str:
    parts = [style.vertical]
    for column in range(grid.columns):
        parts.append(cell_body(Cell(row, column), distances))
        parts.append(style.vertical if _vertical_wall(grid, row, column + 1) else " ")
    return "".join(parts)


def render_lines(grid: Grid, distances: Optional[Mapping] = None, style: str = "ascii") -> List[str]:
    try:
        chosen = STYLES[style]
    except KeyError:
        raise ValueError(f"Unknown style '{style}' (choose from: {', '.join(STYLES)})") from None

    lines = [_wall_line(grid, chosen, 0)]
    for row in range(grid.rows):
        lines.append(_body_line(grid, chosen, row, distances))
        lines.append(_wall_line(grid, chosen, row + 1))
    return lines


def render(grid: Grid, distances: Optional[Mapping] = None, style: str = "ascii") -> str:
    """
    Renders grid as text, one newline-terminated line per row segment.
    distances: optional overlay (Distances or any cell -> int mapping);
    cells it contains show their value in base 36.
    """
    return "".join(line + "\n" for line in render_lines(grid, distances, style))
