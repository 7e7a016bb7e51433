from typing import Iterator, List
from gridmaze.core.grid import Cell, Grid
from gridmaze.algo.base import Generator

class Sidewinder(Generator):
    """
    Row by row, grows runs of east-linked cells. Closing a run links one of
    its members north. The top row is a single corridor.
    """
    name = "sidewinder"

    def run(self) -> Iterator[str]:
        for row in self.grid.each_row():
            run: List[Cell] = []

            for cell in row:
                run.append(cell)

                at_eastern_boundary = self.grid.neighbor(cell, Grid.EAST) is None
                at_northern_boundary = self.grid.neighbor(cell, Grid.NORTH) is None

                should_close_out = at_eastern_boundary or (
                    not at_northern_boundary and self.rng.randrange(2) == 0
                )

                if should_close_out:
                    member = self.rng.choice(run)
                    north = self.grid.neighbor(member, Grid.NORTH)
                    if north is not None:
                        self.grid.link(member, north)
                    run = []
                else:
                    self.grid.link(cell, self.grid.neighbor(cell, Grid.EAST))

                self.step_count += 1
                if self.step_count % 100 == 0:
                    yield f"Row {cell.row}/{self.grid.rows}"

        yield "Done"
