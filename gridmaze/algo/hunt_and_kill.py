from typing import Iterator, Optional, Set
from gridmaze.core.grid import Cell
from gridmaze.algo.base import Generator

class HuntAndKill(Generator):
    """
    Random walk that never revisits. On a dead end the grid is scanned
    row-major for the first unvisited cell bordering the visited region,
    which is linked in and becomes the new walker.
    """
    name = "hunt_and_kill"

    def run(self) -> Iterator[str]:
        current: Optional[Cell] = self.grid.random_cell(self.rng)
        visited: Set[Cell] = {current}

        while current is not None:
            unvisited = [n for n in self.grid.neighbors_of(current) if n not in visited]

            if unvisited:
                # Kill
                neighbor = self.rng.choice(unvisited)
                self.grid.link(current, neighbor)
                visited.add(neighbor)
                current = neighbor
            else:
                # Hunt
                current = self.hunt(visited)

            self.step_count += 1
            if self.step_count % 100 == 0:
                yield f"Visited: {len(visited)}/{self.grid.size}"

        yield "Done"

    def hunt(self, visited: Set[Cell]) -> Optional[Cell]:
        for cell in self.grid:
            if cell in visited:
                continue
            visited_neighbors = [n for n in self.grid.neighbors_of(cell) if n in visited]
            if visited_neighbors:
                self.grid.link(cell, self.rng.choice(visited_neighbors))
                visited.add(cell)
                return cell
        return None
