from typing import Iterator, List
from gridmaze.core.grid import Cell
from gridmaze.algo.base import Generator

class RecursiveBacktracker(Generator):
    name = "recursive_backtracker"

    def __init__(self, grid, rng=None, seed=None, start=None):
        super().__init__(grid, rng=rng, seed=seed)
        self.start = start

    def run(self) -> Iterator[str]:
        start = Cell(*self.start) if self.start is not None else self.grid.random_cell(self.rng)
        visited = {start}

        stack: List[Cell] = [start]

        while stack:
            current = stack[-1]

            neighbors = [n for n in self.grid.neighbors_of(current) if n not in visited]

            if neighbors:
                # Choose random neighbor
                neighbor = self.rng.choice(neighbors)

                # Carve
                self.grid.link(current, neighbor)
                visited.add(neighbor)

                stack.append(neighbor)
                self.step_count += 1

                # Yield every N steps to keep UI responsive without spamming
                if self.step_count % 100 == 0:
                    yield f"Carving... Stack: {len(stack)}"
            else:
                # Backtrack
                stack.pop()

        yield "Done"
