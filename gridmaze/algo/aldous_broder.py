from typing import Iterator
from gridmaze.algo.base import Generator

class AldousBroder(Generator):
    """
    Uniform spanning tree by plain random walk. Only steps that enter an
    unvisited cell are linked. Slow to finish on large grids because the
    walk keeps crossing already-visited territory.
    """
    name = "aldous_broder"

    def run(self) -> Iterator[str]:
        cell = self.grid.random_cell(self.rng)
        visited = {cell}
        unvisited = self.grid.size - 1

        while unvisited > 0:
            neighbor = self.rng.choice(self.grid.neighbors_of(cell))

            if neighbor not in visited:
                self.grid.link(cell, neighbor)
                visited.add(neighbor)
                unvisited -= 1

            cell = neighbor
            self.step_count += 1
            if self.step_count % 100 == 0:
                yield f"Walking... Unvisited: {unvisited}"

        yield "Done"
