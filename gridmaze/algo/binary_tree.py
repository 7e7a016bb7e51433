from typing import Iterator
from gridmaze.core.grid import Grid
from gridmaze.algo.base import Generator

class BinaryTree(Generator):
    """
    Every cell links north or east. Biased: the top row and the eastern
    column always end up as unbroken corridors.
    """
    name = "binary_tree"

    def run(self) -> Iterator[str]:
        for cell in self.grid:
            candidates = []
            north = self.grid.neighbor(cell, Grid.NORTH)
            if north is not None:
                candidates.append(north)
            east = self.grid.neighbor(cell, Grid.EAST)
            if east is not None:
                candidates.append(east)

            # North-east corner has nowhere to go
            if not candidates:
                continue

            self.grid.link(cell, self.rng.choice(candidates))
            self.step_count += 1
            if self.step_count % 100 == 0:
                yield f"Row {cell.row}/{self.grid.rows}"

        yield "Done"
