from typing import Iterator, List, Set
from gridmaze.core.grid import Cell
from gridmaze.algo.base import Generator

class PrimsAlgorithm(Generator):
    """
    Simplified Prim's: grow the tree from a random cell by repeatedly
    attaching a random frontier cell to one of its visited neighbors.
    """
    name = "prim"

    def run(self) -> Iterator[str]:
        start = self.grid.random_cell(self.rng)
        visited: Set[Cell] = {start}

        # Set for O(1) membership, list for random choice
        frontier_set: Set[Cell] = set()
        frontier_list: List[Cell] = []

        def add_frontier(cell: Cell):
            for neighbor in self.grid.neighbors_of(cell):
                if neighbor not in visited and neighbor not in frontier_set:
                    frontier_set.add(neighbor)
                    frontier_list.append(neighbor)

        add_frontier(start)

        while frontier_list:
            # Pick random cell from frontier
            idx = self.rng.randrange(len(frontier_list))
            # Swap remove for O(1)
            cell = frontier_list[idx]
            frontier_list[idx] = frontier_list[-1]
            frontier_list.pop()
            frontier_set.remove(cell)

            # Carve to one random visited neighbor
            inside = [n for n in self.grid.neighbors_of(cell) if n in visited]
            self.grid.link(cell, self.rng.choice(inside))
            visited.add(cell)
            add_frontier(cell)

            self.step_count += 1
            if self.step_count % 100 == 0:
                yield f"Frontier: {len(frontier_list)}"

        yield "Done"
