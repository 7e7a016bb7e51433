from array import array
from typing import Iterator, List, NamedTuple, Optional, Tuple

from gridmaze.core.errors import InvalidDimensions, NotAdjacent, OutOfBounds


class Cell(NamedTuple):
    row: int
    column: int


class MovementOptions(NamedTuple):
    """Open neighbor per direction. None means a wall or the maze edge."""
    north: Optional[Cell]
    east: Optional[Cell]
    south: Optional[Cell]
    west: Optional[Cell]


class Grid:
    # Bitmask Constants
    NORTH = 0b0001
    EAST  = 0b0010
    SOUTH = 0b0100
    WEST  = 0b1000

    # All walls present by default (N|E|S|W) = 15
    ALL_WALLS = NORTH | EAST | SOUTH | WEST

    # Direction Helpers (row grows southward)
    DROW = {NORTH: -1, SOUTH: 1, EAST: 0, WEST: 0}
    DCOL = {NORTH: 0, SOUTH: 0, EAST: 1, WEST: -1}
    OPPOSITE = {NORTH: SOUTH, SOUTH: NORTH, EAST: WEST, WEST: EAST}
    DIRECTIONS = (NORTH, SOUTH, EAST, WEST)

    __slots__ = ('rows', 'columns', 'cells')

    def __init__(self, rows: int, columns: int):
        if rows <= 0 or columns <= 0:
            raise InvalidDimensions(rows, columns)
        self.rows = rows
        self.columns = columns
        # One byte of wall bits per cell, row-major
        self.cells = array('B', [self.ALL_WALLS] * (rows * columns))

    @property
    def size(self) -> int:
        return self.rows * self.columns

    def __len__(self) -> int:
        return self.rows * self.columns

    def __iter__(self) -> Iterator[Cell]:
        for row in range(self.rows):
            for column in range(self.columns):
                yield Cell(row, column)

    def __repr__(self) -> str:
        return f"Grid({self.rows}, {self.columns})"

    def each_row(self) -> Iterator[List[Cell]]:
        for row in range(self.rows):
            yield [Cell(row, column) for column in range(self.columns)]

    def contains(self, cell: Tuple[int, int]) -> bool:
        row, column = cell
        return 0 <= row < self.rows and 0 <= column < self.columns

    def get_index(self, row: int, column: int) -> int:
        if 0 <= row < self.rows and 0 <= column < self.columns:
            return row * self.columns + column
        raise OutOfBounds(row, column, self.rows, self.columns)

    def random_cell(self, rng) -> Cell:
        index = rng.randrange(self.rows * self.columns)
        return Cell(*divmod(index, self.columns))

    def neighbor(self, cell: Tuple[int, int], dir_bit: int) -> Optional[Cell]:
        row = cell[0] + self.DROW[dir_bit]
        column = cell[1] + self.DCOL[dir_bit]
        if 0 <= row < self.rows and 0 <= column < self.columns:
            return Cell(row, column)
        return None

    def get_neighbors(self, cell: Tuple[int, int]) -> Iterator[Tuple[Cell, int]]:
        """
        Yields (neighbor, direction_to_neighbor) for all valid grid neighbors.
        Does NOT check walls.
        """
        row, column = cell
        self.get_index(row, column)
        # North
        if row > 0:
            yield (Cell(row - 1, column), self.NORTH)
        # South
        if row < self.rows - 1:
            yield (Cell(row + 1, column), self.SOUTH)
        # East
        if column < self.columns - 1:
            yield (Cell(row, column + 1), self.EAST)
        # West
        if column > 0:
            yield (Cell(row, column - 1), self.WEST)

    def neighbors_of(self, cell: Tuple[int, int]) -> List[Cell]:
        return [neighbor for neighbor, _ in self.get_neighbors(cell)]

    def direction_between(self, a: Tuple[int, int], b: Tuple[int, int]) -> Optional[int]:
        """Direction bit leading from a to b, or None if they are not neighbors."""
        drow = b[0] - a[0]
        dcol = b[1] - a[1]
        for dir_bit in self.DIRECTIONS:
            if self.DROW[dir_bit] == drow and self.DCOL[dir_bit] == dcol:
                return dir_bit
        return None

    def link(self, a: Tuple[int, int], b: Tuple[int, int]):
        """
        Removes the wall between a and b on both sides.
        Validates everything before touching the cells, so a failed call
        leaves the grid unchanged.
        """
        idx1 = self.get_index(*a)
        idx2 = self.get_index(*b)
        dir_bit = self.direction_between(a, b)
        if dir_bit is None:
            raise NotAdjacent(a, b)

        self.cells[idx1] &= ~dir_bit
        self.cells[idx2] &= ~self.OPPOSITE[dir_bit]

    def carve_path(self, cell: Tuple[int, int], dir_bit: int):
        """Links cell to its neighbor in 'dir_bit'. No-op at the edge."""
        neighbor = self.neighbor(cell, dir_bit)
        if neighbor is None:
            return # Cannot carve into void
        self.link(cell, neighbor)

    def is_linked(self, a: Tuple[int, int], b: Tuple[int, int]) -> bool:
        if not (self.contains(a) and self.contains(b)):
            return False
        dir_bit = self.direction_between(a, b)
        if dir_bit is None:
            return False
        return not self.has_wall(a, dir_bit)

    def has_wall(self, cell: Tuple[int, int], dir_bit: int) -> bool:
        return (self.cells[self.get_index(*cell)] & dir_bit) != 0

    def links(self, cell: Tuple[int, int]) -> List[Cell]:
        """Neighbors that are NOT blocked by a wall, in N, S, E, W order."""
        val = self.cells[self.get_index(*cell)]
        return [n for n, dir_bit in self.get_neighbors(cell) if not (val & dir_bit)]

    def movement_options(self, cell: Tuple[int, int]) -> MovementOptions:
        open_ = {}
        for dir_bit in self.DIRECTIONS:
            neighbor = self.neighbor(cell, dir_bit)
            if neighbor is not None and not self.has_wall(cell, dir_bit):
                open_[dir_bit] = neighbor
        return MovementOptions(
            north=open_.get(self.NORTH),
            east=open_.get(self.EAST),
            south=open_.get(self.SOUTH),
            west=open_.get(self.WEST),
        )

    def link_count(self) -> int:
        # Each pair is counted once, from its western or northern member
        count = 0
        for idx, val in enumerate(self.cells):
            row, column = divmod(idx, self.columns)
            if column < self.columns - 1 and not (val & self.EAST):
                count += 1
            if row < self.rows - 1 and not (val & self.SOUTH):
                count += 1
        return count

    def dead_ends(self) -> List[Cell]:
        return [cell for cell in self if len(self.links(cell)) == 1]
