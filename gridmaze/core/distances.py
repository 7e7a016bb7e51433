import logging
from collections import deque
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import numpy as np

from gridmaze.core.errors import OutOfBounds, Unreachable
from gridmaze.core.grid import Cell, Grid

logger = logging.getLogger(__name__)


class Distances:
    """
    Hop counts from a root cell to every cell reachable through links.
    Built once by a breadth-first pass; entries keep traversal order.
    """

    def __init__(self, grid: Grid, root: Tuple[int, int], cells: Dict[Cell, int] = None):
        self.grid = grid
        self.root = Cell(*root)
        self._cells: Dict[Cell, int] = cells if cells is not None else {self.root: 0}

    @classmethod
    def build(cls, grid: Grid, root: Tuple[int, int]) -> "Distances":
        if not grid.contains(root):
            raise OutOfBounds(root[0], root[1], grid.rows, grid.columns)

        root = Cell(*root)
        cells = {root: 0}
        queue = deque([root])

        while queue:
            current = queue.popleft()
            distance = cells[current]
            for neighbor in grid.links(current):
                # First visit is the shortest in an unweighted graph
                if neighbor not in cells:
                    cells[neighbor] = distance + 1
                    queue.append(neighbor)

        logger.debug("Distances from %s reached %d/%d cells", tuple(root), len(cells), grid.size)
        return cls(grid, root, cells)

    def _check_bounds(self, cell: Tuple[int, int]):
        if not self.grid.contains(cell):
            raise OutOfBounds(cell[0], cell[1], self.grid.rows, self.grid.columns)

    def __getitem__(self, cell: Tuple[int, int]) -> int:
        self._check_bounds(cell)
        try:
            return self._cells[Cell(*cell)]
        except KeyError:
            raise Unreachable(cell) from None

    def __contains__(self, cell) -> bool:
        return Cell(*cell) in self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def get(self, cell: Tuple[int, int], default: Optional[int] = None) -> Optional[int]:
        return self._cells.get(Cell(*cell), default)

    def cells(self) -> List[Cell]:
        return list(self._cells)

    def items(self):
        return self._cells.items()

    def max(self) -> Tuple[Cell, int]:
        """Farthest cell and its distance. Ties go to the first one reached."""
        best_cell, best = self.root, 0
        for cell, distance in self._cells.items():
            if distance > best:
                best_cell, best = cell, distance
        return best_cell, best

    def path_to(self, target: Tuple[int, int]) -> List[Cell]:
        """Cells from the root to target, inclusive, along a shortest path."""
        self._check_bounds(target)
        current = Cell(*target)
        if current not in self._cells:
            raise Unreachable(target)

        path = [current]
        while self._cells[current] > 0:
            distance = self._cells[current]
            for neighbor in self.grid.links(current):
                if self._cells.get(neighbor) == distance - 1:
                    current = neighbor
                    break
            else:
                # Predecessor missing, e.g. on a subset without the root
                raise Unreachable(target)
            path.append(current)

        path.reverse()
        return path

    def subset(self, cells: Iterable[Tuple[int, int]]) -> "Distances":
        """Same distances restricted to the given cells (e.g. a path)."""
        kept = {}
        for cell in cells:
            cell = Cell(*cell)
            kept[cell] = self[cell]
        return Distances(self.grid, self.root, kept)

    def to_array(self) -> np.ndarray:
        """rows x columns int32 matrix, -1 where a cell is unreachable."""
        out = np.full((self.grid.rows, self.grid.columns), -1, dtype=np.int32)
        for (row, column), distance in self._cells.items():
            out[row, column] = distance
        return out


def longest_path(grid: Grid, start: Tuple[int, int] = (0, 0)) -> List[Cell]:
    """
    Approximates the maze diameter with two passes: the farthest cell from
    start becomes the new root, and the farthest cell from there is the goal.
    Exact for spanning trees.
    """
    first = Distances.build(grid, start)
    new_root, _ = first.max()
    second = Distances.build(grid, new_root)
    goal, _ = second.max()
    return second.path_to(goal)
